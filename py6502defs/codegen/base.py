"""Shared plumbing for the declaration emitters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, TextIO

from py6502defs.cpu.opcodes import Instruction, LookupTable
from py6502defs.utils import debug_log


@dataclass(frozen=True)
class EmitterConfig:
    """Names of the consuming-side items the declarations refer to."""

    handler_owner: str = "Cpu"
    struct_name: str = "Instruction"
    macro_name: str = "build_definitions"
    indent: str = "    "

    def __post_init__(self) -> None:
        for field_name in ("handler_owner", "struct_name", "macro_name"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.isidentifier():
                raise ValueError(f"{field_name} must be an identifier, got {value!r}")
        if self.indent.strip():
            raise ValueError("indent must be whitespace only")

    def handler_ref(self, handler: str) -> str:
        return f"{self.handler_owner}::{handler}"


def format_opcode(opcode: int) -> str:
    return f"{opcode:02X}"


class Emitter:
    """Base class for the output formats.

    Subclasses turn the table into a list of declaration strings
    (``declarations``) and join them into the final text (``wrap``). Nothing
    is written until the whole text has been rendered.
    """

    mode_name = ""

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self.config = config or EmitterConfig()

    def declarations(self, table: LookupTable) -> List[str]:
        raise NotImplementedError

    def wrap(self, declarations: Sequence[str]) -> str:
        raise NotImplementedError

    def render(self, table: Sequence[Instruction]) -> str:
        lookup = _ensure_table(table)
        return self.wrap(self.declarations(lookup))

    def emit(self, table: Sequence[Instruction], stream: TextIO) -> int:
        """Write the rendered declarations to ``stream`` and return their count."""

        lookup = _ensure_table(table)
        declarations = self.declarations(lookup)
        stream.write(self.wrap(declarations))
        debug_log("codegen", "%s mode wrote %d declarations", self.mode_name, len(declarations))
        return len(declarations)


def _ensure_table(table: Sequence[Instruction]) -> LookupTable:
    if isinstance(table, LookupTable):
        return table
    return LookupTable(table)
