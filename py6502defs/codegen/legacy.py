"""Per-opcode constant declarations (``legacy`` mode)."""

from __future__ import annotations

from typing import List, Sequence

from py6502defs.cpu.opcodes import Instruction, LookupTable

from .base import Emitter, format_opcode


class LegacyEmitter(Emitter):
    """Emit one constant per opcode that has a documented mnemonic.

    Opcodes without a mnemonic are skipped, so the generated names leave gaps
    where the illegal opcodes sit.
    """

    mode_name = "legacy"

    def declarations(self, table: LookupTable) -> List[str]:
        return [self.declaration(ins) for ins in table if ins.has_mnemonic]

    def declaration(self, instruction: Instruction) -> str:
        config = self.config
        indent = config.indent
        opcode = format_opcode(instruction.opcode)
        struct = config.struct_name
        lines = [
            f"pub const {instruction.mnemonic}_{opcode}: {struct} = {struct} {{",
            f'{indent}name: "{instruction.mnemonic}",',
            f"{indent}opcode: 0x{opcode},",
            f"{indent}cycles: {instruction.cycles},",
            f"{indent}addrmode: {config.handler_ref(instruction.mode_handler)},",
            f"{indent}execute: {config.handler_ref(instruction.operation_handler)},",
            "};",
        ]
        return "\n".join(lines) + "\n"

    def wrap(self, declarations: Sequence[str]) -> str:
        return "".join(f"{block}\n" for block in declarations)
