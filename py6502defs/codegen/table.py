"""Aggregate macro list covering every opcode (``table`` mode)."""

from __future__ import annotations

from typing import List, Sequence

from py6502defs.cpu.opcodes import ILLEGAL_OPERATION, NOP_OPERATION, Instruction, LookupTable

from .base import Emitter, format_opcode


def display_mnemonic(instruction: Instruction) -> str:
    """Mnemonic used for naming; unassigned opcodes become ``XXX``."""

    if not instruction.has_mnemonic:
        return ILLEGAL_OPERATION
    return instruction.mnemonic


def bound_operation(instruction: Instruction) -> str:
    """Operation handler to bind; an illegal operation falls back to ``nop``."""

    if not instruction.has_operation:
        return NOP_OPERATION.lower()
    return instruction.operation_handler


class TableEmitter(Emitter):
    """Emit a single macro invocation with one entry per opcode."""

    mode_name = "table"

    def declarations(self, table: LookupTable) -> List[str]:
        return [self.entry(ins) for ins in table]

    def entry(self, instruction: Instruction) -> str:
        config = self.config
        opcode = format_opcode(instruction.opcode)
        fields = (
            f"X{opcode}_{display_mnemonic(instruction)}",
            f"0x{opcode}",
            str(instruction.cycles),
            config.handler_ref(instruction.mode_handler),
            config.handler_ref(bound_operation(instruction)),
        )
        return f"{config.indent}({', '.join(fields)}),\n"

    def open_marker(self) -> str:
        return f"{self.config.macro_name}![\n"

    def close_marker(self) -> str:
        return "];\n"

    def wrap(self, declarations: Sequence[str]) -> str:
        return self.open_marker() + "".join(declarations) + self.close_marker()
