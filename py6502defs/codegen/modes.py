"""Output mode selection."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, TextIO

from py6502defs.cpu.opcodes import LOOKUP_TABLE, Instruction
from py6502defs.utils import debug_log

from .base import Emitter, EmitterConfig
from .legacy import LegacyEmitter
from .table import TableEmitter


class EmitMode(Enum):
    LEGACY = "legacy"
    TABLE = "table"

    @classmethod
    def parse(cls, value: "str | EmitMode | None") -> "EmitMode":
        """Resolve an exact mode name, falling back to ``TABLE`` otherwise."""

        if isinstance(value, cls):
            return value
        if value is None:
            return cls.TABLE
        for mode in cls:
            if mode.value == value:
                return mode
        debug_log("codegen", "unknown mode %r, using %s", value, cls.TABLE.value)
        return cls.TABLE


DEFAULT_MODE = EmitMode.TABLE

_EMITTERS: dict[EmitMode, type[Emitter]] = {
    EmitMode.LEGACY: LegacyEmitter,
    EmitMode.TABLE: TableEmitter,
}


def create_emitter(mode: "str | EmitMode | None" = None, config: EmitterConfig | None = None) -> Emitter:
    return _EMITTERS[EmitMode.parse(mode)](config)


def emit_definitions(
    stream: TextIO,
    mode: "str | EmitMode | None" = DEFAULT_MODE,
    table: Sequence[Instruction] = LOOKUP_TABLE,
    config: EmitterConfig | None = None,
) -> int:
    """Write the declarations for ``table`` in ``mode`` to ``stream``."""

    return create_emitter(mode, config).emit(table, stream)
