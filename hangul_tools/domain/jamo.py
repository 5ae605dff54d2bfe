"""Jamo value types (domain layer).

Each jamo is identified by its index in the Unicode tables of
`hangul_unicode`; both spellings (compatibility "ㄱ" and conjoining U+1100)
are derived from that index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hangul_tools.domain.hangul_unicode import (
    CHOSEONG,
    COMPOUND_JONGSEONG,
    COMPOUND_JUNGSEONG,
    JONGSEONG,
    JUNGSEONG,
    L_BASE,
    L_COUNT,
    T_BASE,
    T_COUNT,
    V_BASE,
    V_COUNT,
    is_conjoining_choseong,
    is_conjoining_jongseong,
    is_conjoining_jungseong,
)


@dataclass(frozen=True)
class Choseong:
    """Leading consonant."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < L_COUNT:
            raise ValueError("Choseong index out of range: %r" % (self.index,))

    @property
    def compatibility_value(self) -> str:
        return CHOSEONG[self.index]

    @property
    def conjoining_value(self) -> str:
        return chr(L_BASE + self.index)

    @classmethod
    def from_conjoining(cls, ch: str) -> Optional[Choseong]:
        if not is_conjoining_choseong(ch):
            return None
        return cls(ord(ch) - L_BASE)


@dataclass(frozen=True)
class Jungseong:
    """Medial vowel."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < V_COUNT:
            raise ValueError("Jungseong index out of range: %r" % (self.index,))

    @property
    def compatibility_value(self) -> str:
        return JUNGSEONG[self.index]

    @property
    def conjoining_value(self) -> str:
        return chr(V_BASE + self.index)

    @property
    def is_compound(self) -> bool:
        return self.compatibility_value in COMPOUND_JUNGSEONG

    def letters(self) -> tuple[str, ...]:
        """Return the vowel as its component letters (ㅘ -> ("ㅗ", "ㅏ"))."""
        value = self.compatibility_value
        return COMPOUND_JUNGSEONG.get(value, (value,))

    @classmethod
    def from_conjoining(cls, ch: str) -> Optional[Jungseong]:
        if not is_conjoining_jungseong(ch):
            return None
        return cls(ord(ch) - V_BASE)


@dataclass(frozen=True)
class Jongseong:
    """Final consonant (batchim).

    Index 0 ("no final") is not a Jongseong; a syllable without a final
    consonant carries None instead.
    """

    index: int

    def __post_init__(self) -> None:
        if not 0 < self.index < T_COUNT:
            raise ValueError("Jongseong index out of range: %r" % (self.index,))

    @property
    def compatibility_value(self) -> str:
        return JONGSEONG[self.index]

    @property
    def conjoining_value(self) -> str:
        return chr(T_BASE + self.index)

    @property
    def is_compound(self) -> bool:
        return self.compatibility_value in COMPOUND_JONGSEONG

    def letters(self) -> tuple[str, ...]:
        """Return the final as its component letters (ㄺ -> ("ㄹ", "ㄱ"))."""
        value = self.compatibility_value
        return COMPOUND_JONGSEONG.get(value, (value,))

    @classmethod
    def from_conjoining(cls, ch: str) -> Optional[Jongseong]:
        if not is_conjoining_jongseong(ch):
            return None
        return cls(ord(ch) - T_BASE)
