"""Generator for 6502 instruction declarations.

Turns the 256-entry opcode lookup table into source declarations for an
emulator dispatch core, either as per-opcode constants or as one macro table.
"""

from __future__ import annotations

from . import utils, cpu, codegen

__all__: list[str] = [
    "cpu",
    "codegen",
    "utils",
]
