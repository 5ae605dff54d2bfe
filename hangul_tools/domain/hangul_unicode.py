"""Hangul Unicode tables and syllable arithmetic (domain layer).

It provides:
  - The jamo tables for initial consonants (choseong), vowels (jungseong)
    and final consonants (jongseong), as compatibility jamo
  - `is_hangul_syllable()` for classifying a single character
  - `syllable_indices()` for recovering the (L, V, T) indices of a syllable
  - Compound jamo maps used when writing a syllable out letter by letter

Notes:
  - A syllable's code point is SBase + (LIndex * VCount + VIndex) * TCount + TIndex,
    so the indices are recovered with divmod in the reverse order.
  - Conjoining jamo (U+1100 block, used by NFD text) are only described here;
    they are not syllables.
"""

from __future__ import annotations

from typing import Final


# -----------------------------------------------------------------------------
# Syllable block constants
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00
L_COUNT: Final[int] = 19
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT
S_COUNT: Final[int] = L_COUNT * N_COUNT
S_LAST: Final[int] = S_BASE + S_COUNT - 1

# Conjoining jamo (NFD)
L_BASE: Final[int] = 0x1100
V_BASE: Final[int] = 0x1161
# TIndex 0 means "no final", so the first real final sits at T_BASE + 1
T_BASE: Final[int] = 0x11A7


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo in Unicode order
# -----------------------------------------------------------------------------

CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

# Final consonant clusters written as two letters
COMPOUND_JONGSEONG: Final[dict[str, tuple[str, str]]] = {
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄶ": ("ㄴ", "ㅎ"),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅅ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅀ": ("ㄹ", "ㅎ"),
    "ㅄ": ("ㅂ", "ㅅ"),
}

# Diphthongs written as two vowel letters
COMPOUND_JUNGSEONG: Final[dict[str, tuple[str, str]]] = {
    "ㅘ": ("ㅗ", "ㅏ"),
    "ㅙ": ("ㅗ", "ㅐ"),
    "ㅚ": ("ㅗ", "ㅣ"),
    "ㅝ": ("ㅜ", "ㅓ"),
    "ㅞ": ("ㅜ", "ㅔ"),
    "ㅟ": ("ㅜ", "ㅣ"),
    "ㅢ": ("ㅡ", "ㅣ"),
}


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def is_hangul_syllable(ch: str) -> bool:
    """Return True if `ch` is a single precomposed syllable (U+AC00..U+D7A3)."""
    if len(ch) != 1:
        return False
    return S_BASE <= ord(ch) <= S_LAST


def is_conjoining_choseong(ch: str) -> bool:
    return len(ch) == 1 and L_BASE <= ord(ch) < L_BASE + L_COUNT


def is_conjoining_jungseong(ch: str) -> bool:
    return len(ch) == 1 and V_BASE <= ord(ch) < V_BASE + V_COUNT


def is_conjoining_jongseong(ch: str) -> bool:
    return len(ch) == 1 and T_BASE < ord(ch) < T_BASE + T_COUNT


# -----------------------------------------------------------------------------
# Syllable arithmetic
# -----------------------------------------------------------------------------

def syllable_indices(ch: str) -> tuple[int, int, int]:
    """Recover the (choseong, jungseong, jongseong) indices of a syllable.

    Args:
        ch: A precomposed Hangul syllable (e.g., "한")

    Returns:
        Index triple into CHOSEONG, JUNGSEONG and JONGSEONG, e.g. (18, 0, 4).
        The jongseong index is 0 when the syllable has no final consonant.

    Raises:
        ValueError: if `ch` is not a precomposed Hangul syllable.
    """
    if not is_hangul_syllable(ch):
        raise ValueError("Not a Hangul syllable: %r" % (ch,))

    rest, jong = divmod(ord(ch) - S_BASE, T_COUNT)
    cho, jung = divmod(rest, V_COUNT)
    return cho, jung, jong
