"""Disassemble precomposed Hangul syllables into jamo."""

from hangul_tools.domain.hangul import Hangul, disassemble, get_choseong
from hangul_tools.domain.hangul_letter import HangulLetter
from hangul_tools.domain.options import DisassembleOptions

__all__ = [
    "DisassembleOptions",
    "Hangul",
    "HangulLetter",
    "disassemble",
    "get_choseong",
]
