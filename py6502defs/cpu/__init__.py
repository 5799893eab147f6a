"""6502 opcode table."""

from .opcodes import (
    ILLEGAL_OPERATION,
    LOOKUP_TABLE,
    NOP_OPERATION,
    TABLE_SIZE,
    UNASSIGNED_MNEMONIC,
    AddressingMode,
    Instruction,
    LookupTable,
    OpcodeTable,
    OpcodeTableError,
    build_lookup_table,
)
from . import opcodes

__all__ = [
    "AddressingMode",
    "Instruction",
    "LookupTable",
    "OpcodeTable",
    "OpcodeTableError",
    "build_lookup_table",
    "LOOKUP_TABLE",
    "TABLE_SIZE",
    "UNASSIGNED_MNEMONIC",
    "ILLEGAL_OPERATION",
    "NOP_OPERATION",
    "opcodes",
]
