"""Declaration emitters for the opcode table."""

from .base import Emitter, EmitterConfig, format_opcode
from .legacy import LegacyEmitter
from .modes import DEFAULT_MODE, EmitMode, create_emitter, emit_definitions
from .table import TableEmitter, bound_operation, display_mnemonic

__all__ = [
    "Emitter",
    "EmitterConfig",
    "LegacyEmitter",
    "TableEmitter",
    "EmitMode",
    "DEFAULT_MODE",
    "create_emitter",
    "emit_definitions",
    "format_opcode",
    "display_mnemonic",
    "bound_operation",
]
