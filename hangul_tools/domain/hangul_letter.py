"""A single Hangul syllable and its jamo (domain layer).

A `HangulLetter` is parsed either from one precomposed syllable ("한") or
from the 2-3 conjoining jamo that spell it in NFD text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from hangul_tools.domain.hangul_unicode import is_hangul_syllable, syllable_indices
from hangul_tools.domain.jamo import Choseong, Jongseong, Jungseong
from hangul_tools.domain.options import DEFAULT_OPTIONS, DisassembleOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HangulLetter:
    value_chars: tuple[str, ...]
    choseong: Choseong
    jungseong: Jungseong
    jongseong: Optional[Jongseong] = None

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def from_syllable(cls, ch: str) -> HangulLetter:
        """Build a letter from one precomposed syllable.

        Raises:
            ValueError: if `ch` is not a precomposed Hangul syllable.
        """
        cho, jung, jong = syllable_indices(ch)
        return cls(
            value_chars=(ch,),
            choseong=Choseong(cho),
            jungseong=Jungseong(jung),
            jongseong=Jongseong(jong) if jong else None,
        )

    @classmethod
    def parse_from_char(cls, ch: str) -> Optional[HangulLetter]:
        """Return the letter for a precomposed syllable, or None for anything else."""
        if not is_hangul_syllable(ch):
            return None
        return cls.from_syllable(ch)

    @classmethod
    def parse(cls, string: str) -> Optional[HangulLetter]:
        """Parse one syllable written either precomposed (NFC) or as conjoining jamo (NFD).

        Returns None unless `string` is exactly one syllable: a single
        precomposed character, or a conjoining choseong + jungseong with an
        optional conjoining jongseong.
        """
        if is_hangul_syllable(string):
            return cls.from_syllable(string)

        if len(string) not in (2, 3):
            logger.debug("HangulLetter.parse: not a syllable: %r", string)
            return None

        cho = Choseong.from_conjoining(string[0])
        jung = Jungseong.from_conjoining(string[1])
        jong = Jongseong.from_conjoining(string[2]) if len(string) == 3 else None
        if cho is None or jung is None or (len(string) == 3 and jong is None):
            logger.debug("HangulLetter.parse: invalid jamo sequence: %r", string)
            return None

        return cls(value_chars=tuple(string), choseong=cho, jungseong=jung, jongseong=jong)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def value_string(self) -> str:
        return "".join(self.value_chars)

    @property
    def unicode_codes(self) -> tuple[int, ...]:
        return tuple(ord(ch) for ch in self.value_chars)

    @property
    def value_nfc(self) -> Optional[str]:
        """The precomposed syllable this letter was parsed from, if any."""
        if len(self.value_chars) == 1:
            return self.value_chars[0]
        return None

    @property
    def has_batchim(self) -> bool:
        return self.jongseong is not None

    # -------------------------------------------------------------------------
    # Disassembly
    # -------------------------------------------------------------------------

    def jamo(self, options: DisassembleOptions = DEFAULT_OPTIONS) -> list[str]:
        """Return the compatibility jamo of this letter in writing order."""
        out = [self.choseong.compatibility_value]

        if options.split_compound_vowel:
            out.extend(self.jungseong.letters())
        else:
            out.append(self.jungseong.compatibility_value)

        if self.jongseong is not None:
            if options.split_compound_final:
                out.extend(self.jongseong.letters())
            else:
                out.append(self.jongseong.compatibility_value)
        return out

    def disassemble(self, options: DisassembleOptions = DEFAULT_OPTIONS) -> str:
        """Return the letter written out as compatibility jamo (e.g., "값" -> "ㄱㅏㅂㅅ")."""
        return "".join(self.jamo(options))
