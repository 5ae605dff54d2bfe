from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisassembleOptions:
    """How compound jamo are written out by a disassembly.

    split_compound_final: write final clusters as two letters (ㄺ -> ㄹㄱ).
    split_compound_vowel: write diphthongs as two letters (ㅘ -> ㅗㅏ).
    """

    split_compound_final: bool = True
    split_compound_vowel: bool = False


DEFAULT_OPTIONS = DisassembleOptions()
