"""Text-level Hangul disassembly (domain layer).

Primary API:
- Hangul(text).disassemble()
- Hangul(text).get_choseong()
- disassemble(text), get_choseong(text)
- Hangul(text, SettingsStore().get_options()) to apply settings.yaml

Only precomposed syllables (U+AC00..U+D7A3) are expanded. Every other
character, including jamo that are already decomposed (NFD), is copied
through unchanged.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Optional

from hangul_tools.domain.hangul_letter import HangulLetter
from hangul_tools.domain.options import DEFAULT_OPTIONS, DisassembleOptions

logger = logging.getLogger(__name__)


class Hangul:
    """An immutable piece of text with memoized jamo views.

    Each character is classified once, at construction; `disassemble()` and
    `get_choseong()` are computed on first use and return the same string on
    every later call.
    """

    def __init__(self, text: str, options: Optional[DisassembleOptions] = None) -> None:
        self._original = text
        self._options = options or DEFAULT_OPTIONS
        # One entry per character: the parsed letter, or None for pass-through
        self._letters: tuple[Optional[HangulLetter], ...] = tuple(
            HangulLetter.parse_from_char(ch) for ch in text
        )

    def __repr__(self) -> str:
        return "Hangul(%r)" % (self._original,)

    def __len__(self) -> int:
        return len(self._original)

    @property
    def original(self) -> str:
        return self._original

    @property
    def options(self) -> DisassembleOptions:
        return self._options

    def is_empty(self) -> bool:
        return not self._original

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def disassemble(self) -> str:
        """Return the text with every syllable written out as jamo.

        "안녕 Hello" -> "ㅇㅏㄴㄴㅕㅇ Hello"
        """
        return self._disassembled

    def get_choseong(self) -> str:
        """Return the text with every syllable replaced by its leading consonant.

        "안녕 Hello" -> "ㅇㄴ Hello"
        """
        return self._choseong

    getChoseong = get_choseong

    # -------------------------------------------------------------------------
    # Memoized results
    # -------------------------------------------------------------------------

    @cached_property
    def _disassembled(self) -> str:
        out: list[str] = []
        for ch, letter in zip(self._original, self._letters):
            if letter is None:
                out.append(ch)
            else:
                out.extend(letter.jamo(self._options))
        result = "".join(out)
        logger.debug("Hangul.disassemble: %d chars -> %d jamo", len(self), len(result))
        return result

    @cached_property
    def _choseong(self) -> str:
        return "".join(
            ch if letter is None else letter.choseong.compatibility_value
            for ch, letter in zip(self._original, self._letters)
        )


def disassemble(text: str, options: Optional[DisassembleOptions] = None) -> str:
    """Shortcut for Hangul(text, options).disassemble()."""
    return Hangul(text, options).disassemble()


def get_choseong(text: str) -> str:
    """Shortcut for Hangul(text).get_choseong()."""
    return Hangul(text).get_choseong()
