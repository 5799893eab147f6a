"""Opcode metadata for the 6502 instruction set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Iterator, List, Sequence, Tuple

from py6502defs.utils import debug_log

UNASSIGNED_MNEMONIC: Final[str] = "???"
ILLEGAL_OPERATION: Final[str] = "XXX"
NOP_OPERATION: Final[str] = "NOP"

TABLE_SIZE: Final[int] = 0x100


class OpcodeTableError(ValueError):
    """Raised when the opcode table is not a total 256-entry mapping."""


class AddressingMode(Enum):
    """Addressing modes used by the lookup table."""

    IMP = "IMP"
    IMM = "IMM"
    ZP0 = "ZP0"
    ZPX = "ZPX"
    ZPY = "ZPY"
    REL = "REL"
    ABS = "ABS"
    ABX = "ABX"
    ABY = "ABY"
    IND = "IND"
    IZX = "IZX"
    IZY = "IZY"

    @property
    def handler_name(self) -> str:
        return self.value.lower()


def _is_upper_identifier(value: object) -> bool:
    return isinstance(value, str) and value.isascii() and value.isalnum() and value == value.upper()


@dataclass(frozen=True)
class Instruction:
    """Metadata describing a single 6502 opcode."""

    opcode: int
    mnemonic: str
    operation: str
    mode: AddressingMode
    cycles: int

    def __post_init__(self) -> None:
        if not 0 <= self.opcode < TABLE_SIZE:
            raise ValueError(f"opcode out of range: {self.opcode}")
        if self.mnemonic != UNASSIGNED_MNEMONIC and not _is_upper_identifier(self.mnemonic):
            raise ValueError(f"invalid mnemonic for opcode {self.opcode:#04x}: {self.mnemonic!r}")
        if not _is_upper_identifier(self.operation):
            raise ValueError(f"invalid operation for opcode {self.opcode:#04x}: {self.operation!r}")
        if not isinstance(self.mode, AddressingMode):
            raise ValueError(f"invalid addressing mode for opcode {self.opcode:#04x}: {self.mode!r}")
        if not isinstance(self.cycles, int) or isinstance(self.cycles, bool):
            raise ValueError(f"cycles must be an int, got {self.cycles!r}")
        if self.cycles <= 0:
            raise ValueError("cycles must be positive")

    @property
    def has_mnemonic(self) -> bool:
        return self.mnemonic != UNASSIGNED_MNEMONIC

    @property
    def has_operation(self) -> bool:
        return self.operation != ILLEGAL_OPERATION

    @property
    def mode_handler(self) -> str:
        return self.mode.handler_name

    @property
    def operation_handler(self) -> str:
        return self.operation.lower()


class LookupTable(Sequence[Instruction]):
    """Immutable opcode-indexed table holding exactly 256 instructions."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Instruction]) -> None:
        items = tuple(entries)
        if len(items) != TABLE_SIZE:
            raise OpcodeTableError(f"lookup table needs {TABLE_SIZE} entries, got {len(items)}")
        for index, instruction in enumerate(items):
            if not isinstance(instruction, Instruction):
                raise OpcodeTableError(f"entry {index:#04x} is not an Instruction")
            if instruction.opcode != index:
                raise OpcodeTableError(
                    f"entry {index:#04x} carries opcode {instruction.opcode:#04x}")
        self._entries: Tuple[Instruction, ...] = items

    def __len__(self) -> int:
        return TABLE_SIZE

    def __getitem__(self, index):
        return self._entries[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LookupTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def lookup(self, opcode: int) -> Instruction:
        if not 0 <= opcode < TABLE_SIZE:
            raise OpcodeTableError(f"opcode out of range: {opcode}")
        return self._entries[opcode]

    def named(self) -> Iterator[Instruction]:
        """Yield instructions that carry a documented mnemonic."""

        return (ins for ins in self._entries if ins.has_mnemonic)

    def unassigned(self) -> Iterator[Instruction]:
        return (ins for ins in self._entries if not ins.has_mnemonic)


class OpcodeTable:
    """Mutable builder for the 256-entry instruction table."""

    def __init__(self) -> None:
        self._table: List[Instruction | None] = [None] * TABLE_SIZE

    def register(self, instruction: Instruction) -> None:
        opcode = instruction.opcode
        if self._table[opcode] is not None:
            existing = self._table[opcode]
            raise OpcodeTableError(
                f"opcode {opcode:#04x} already registered as {existing.mnemonic}")
        self._table[opcode] = instruction

    def register_all(self, instructions: Iterable[Instruction]) -> None:
        for instruction in instructions:
            self.register(instruction)

    def freeze(self) -> LookupTable:
        missing = [opcode for opcode, entry in enumerate(self._table) if entry is None]
        if missing:
            preview = ", ".join(f"{opcode:#04x}" for opcode in missing[:8])
            raise OpcodeTableError(f"{len(missing)} opcode(s) left undefined: {preview}")
        return LookupTable(self._table)


Row = Tuple[str, str, AddressingMode, int]


def build_lookup_table(rows: Sequence[Row]) -> LookupTable:
    """Build the lookup table from rows authored in opcode order.

    Each row is ``(mnemonic, operation, mode, cycles)``; its position in
    ``rows`` is the opcode it describes.
    """

    if len(rows) != TABLE_SIZE:
        raise OpcodeTableError(f"expected {TABLE_SIZE} rows, got {len(rows)}")

    table = OpcodeTable()
    for opcode, row in enumerate(rows):
        try:
            mnemonic, operation, mode, cycles = row
            instruction = Instruction(opcode, mnemonic, operation, mode, cycles)
        except (TypeError, ValueError) as exc:
            raise OpcodeTableError(f"malformed row for opcode {opcode:#04x}: {exc}") from exc
        table.register(instruction)

    lookup = table.freeze()
    debug_log(
        "table",
        "built lookup table: %d named, %d unassigned",
        sum(1 for _ in lookup.named()),
        sum(1 for _ in lookup.unassigned()),
    )
    return lookup


# Lookup data from olcNES, Copyright 2018-2019 OneLoneCoder.com (OLC-3 licence,
# see LICENSES/OLC-3.txt). Row position is the opcode.
DEFAULT_ROWS: Sequence[Row] = (
    # 0x00
    ("BRK", "BRK", AddressingMode.IMM, 7),
    ("ORA", "ORA", AddressingMode.IZX, 6),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 3),
    ("ORA", "ORA", AddressingMode.ZP0, 3),
    ("ASL", "ASL", AddressingMode.ZP0, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("PHP", "PHP", AddressingMode.IMP, 3),
    ("ORA", "ORA", AddressingMode.IMM, 2),
    ("ASL", "ASL", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("ORA", "ORA", AddressingMode.ABS, 4),
    ("ASL", "ASL", AddressingMode.ABS, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    # 0x10
    ("BPL", "BPL", AddressingMode.REL, 2),
    ("ORA", "ORA", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("ORA", "ORA", AddressingMode.ZPX, 4),
    ("ASL", "ASL", AddressingMode.ZPX, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("CLC", "CLC", AddressingMode.IMP, 2),
    ("ORA", "ORA", AddressingMode.ABY, 4),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 7),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("ORA", "ORA", AddressingMode.ABX, 4),
    ("ASL", "ASL", AddressingMode.ABX, 7),
    ("???", "XXX", AddressingMode.IMP, 7),
    # 0x20
    ("JSR", "JSR", AddressingMode.ABS, 6),
    ("AND", "AND", AddressingMode.IZX, 6),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("BIT", "BIT", AddressingMode.ZP0, 3),
    ("AND", "AND", AddressingMode.ZP0, 3),
    ("ROL", "ROL", AddressingMode.ZP0, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("PLP", "PLP", AddressingMode.IMP, 4),
    ("AND", "AND", AddressingMode.IMM, 2),
    ("ROL", "ROL", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("BIT", "BIT", AddressingMode.ABS, 4),
    ("AND", "AND", AddressingMode.ABS, 4),
    ("ROL", "ROL", AddressingMode.ABS, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    # 0x30
    ("BMI", "BMI", AddressingMode.REL, 2),
    ("AND", "AND", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("AND", "AND", AddressingMode.ZPX, 4),
    ("ROL", "ROL", AddressingMode.ZPX, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("SEC", "SEC", AddressingMode.IMP, 2),
    ("AND", "AND", AddressingMode.ABY, 4),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 7),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("AND", "AND", AddressingMode.ABX, 4),
    ("ROL", "ROL", AddressingMode.ABX, 7),
    ("???", "XXX", AddressingMode.IMP, 7),
    # 0x40
    ("RTI", "RTI", AddressingMode.IMP, 6),
    ("EOR", "EOR", AddressingMode.IZX, 6),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 3),
    ("EOR", "EOR", AddressingMode.ZP0, 3),
    ("LSR", "LSR", AddressingMode.ZP0, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("PHA", "PHA", AddressingMode.IMP, 3),
    ("EOR", "EOR", AddressingMode.IMM, 2),
    ("LSR", "LSR", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("JMP", "JMP", AddressingMode.ABS, 3),
    ("EOR", "EOR", AddressingMode.ABS, 4),
    ("LSR", "LSR", AddressingMode.ABS, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    # 0x50
    ("BVC", "BVC", AddressingMode.REL, 2),
    ("EOR", "EOR", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("EOR", "EOR", AddressingMode.ZPX, 4),
    ("LSR", "LSR", AddressingMode.ZPX, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("CLI", "CLI", AddressingMode.IMP, 2),
    ("EOR", "EOR", AddressingMode.ABY, 4),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 7),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("EOR", "EOR", AddressingMode.ABX, 4),
    ("LSR", "LSR", AddressingMode.ABX, 7),
    ("???", "XXX", AddressingMode.IMP, 7),
    # 0x60
    ("RTS", "RTS", AddressingMode.IMP, 6),
    ("ADC", "ADC", AddressingMode.IZX, 6),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 3),
    ("ADC", "ADC", AddressingMode.ZP0, 3),
    ("ROR", "ROR", AddressingMode.ZP0, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("PLA", "PLA", AddressingMode.IMP, 4),
    ("ADC", "ADC", AddressingMode.IMM, 2),
    ("ROR", "ROR", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("JMP", "JMP", AddressingMode.IND, 5),
    ("ADC", "ADC", AddressingMode.ABS, 4),
    ("ROR", "ROR", AddressingMode.ABS, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    # 0x70
    ("BVS", "BVS", AddressingMode.REL, 2),
    ("ADC", "ADC", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("ADC", "ADC", AddressingMode.ZPX, 4),
    ("ROR", "ROR", AddressingMode.ZPX, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("SEI", "SEI", AddressingMode.IMP, 2),
    ("ADC", "ADC", AddressingMode.ABY, 4),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 7),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("ADC", "ADC", AddressingMode.ABX, 4),
    ("ROR", "ROR", AddressingMode.ABX, 7),
    ("???", "XXX", AddressingMode.IMP, 7),
    # 0x80
    ("???", "NOP", AddressingMode.IMP, 2),
    ("STA", "STA", AddressingMode.IZX, 6),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("STY", "STY", AddressingMode.ZP0, 3),
    ("STA", "STA", AddressingMode.ZP0, 3),
    ("STX", "STX", AddressingMode.ZP0, 3),
    ("???", "XXX", AddressingMode.IMP, 3),
    ("DEY", "DEY", AddressingMode.IMP, 2),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("TXA", "TXA", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("STY", "STY", AddressingMode.ABS, 4),
    ("STA", "STA", AddressingMode.ABS, 4),
    ("STX", "STX", AddressingMode.ABS, 4),
    ("???", "XXX", AddressingMode.IMP, 4),
    # 0x90
    ("BCC", "BCC", AddressingMode.REL, 2),
    ("STA", "STA", AddressingMode.IZY, 6),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("STY", "STY", AddressingMode.ZPX, 4),
    ("STA", "STA", AddressingMode.ZPX, 4),
    ("STX", "STX", AddressingMode.ZPY, 4),
    ("???", "XXX", AddressingMode.IMP, 4),
    ("TYA", "TYA", AddressingMode.IMP, 2),
    ("STA", "STA", AddressingMode.ABY, 5),
    ("TXS", "TXS", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("???", "NOP", AddressingMode.IMP, 5),
    ("STA", "STA", AddressingMode.ABX, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    # 0xA0
    ("LDY", "LDY", AddressingMode.IMM, 2),
    ("LDA", "LDA", AddressingMode.IZX, 6),
    ("LDX", "LDX", AddressingMode.IMM, 2),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("LDY", "LDY", AddressingMode.ZP0, 3),
    ("LDA", "LDA", AddressingMode.ZP0, 3),
    ("LDX", "LDX", AddressingMode.ZP0, 3),
    ("???", "XXX", AddressingMode.IMP, 3),
    ("TAY", "TAY", AddressingMode.IMP, 2),
    ("LDA", "LDA", AddressingMode.IMM, 2),
    ("TAX", "TAX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("LDY", "LDY", AddressingMode.ABS, 4),
    ("LDA", "LDA", AddressingMode.ABS, 4),
    ("LDX", "LDX", AddressingMode.ABS, 4),
    ("???", "XXX", AddressingMode.IMP, 4),
    # 0xB0
    ("BCS", "BCS", AddressingMode.REL, 2),
    ("LDA", "LDA", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("LDY", "LDY", AddressingMode.ZPX, 4),
    ("LDA", "LDA", AddressingMode.ZPX, 4),
    ("LDX", "LDX", AddressingMode.ZPY, 4),
    ("???", "XXX", AddressingMode.IMP, 4),
    ("CLV", "CLV", AddressingMode.IMP, 2),
    ("LDA", "LDA", AddressingMode.ABY, 4),
    ("TSX", "TSX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 4),
    ("LDY", "LDY", AddressingMode.ABX, 4),
    ("LDA", "LDA", AddressingMode.ABX, 4),
    ("LDX", "LDX", AddressingMode.ABY, 4),
    ("???", "XXX", AddressingMode.IMP, 4),
    # 0xC0
    ("CPY", "CPY", AddressingMode.IMM, 2),
    ("CMP", "CMP", AddressingMode.IZX, 6),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("CPY", "CPY", AddressingMode.ZP0, 3),
    ("CMP", "CMP", AddressingMode.ZP0, 3),
    ("DEC", "DEC", AddressingMode.ZP0, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("INY", "INY", AddressingMode.IMP, 2),
    ("CMP", "CMP", AddressingMode.IMM, 2),
    ("DEX", "DEX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("CPY", "CPY", AddressingMode.ABS, 4),
    ("CMP", "CMP", AddressingMode.ABS, 4),
    ("DEC", "DEC", AddressingMode.ABS, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    # 0xD0
    ("BNE", "BNE", AddressingMode.REL, 2),
    ("CMP", "CMP", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("CMP", "CMP", AddressingMode.ZPX, 4),
    ("DEC", "DEC", AddressingMode.ZPX, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("CLD", "CLD", AddressingMode.IMP, 2),
    ("CMP", "CMP", AddressingMode.ABY, 4),
    ("NOP", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 7),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("CMP", "CMP", AddressingMode.ABX, 4),
    ("DEC", "DEC", AddressingMode.ABX, 7),
    ("???", "XXX", AddressingMode.IMP, 7),
    # 0xE0
    ("CPX", "CPX", AddressingMode.IMM, 2),
    ("SBC", "SBC", AddressingMode.IZX, 6),
    ("???", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("CPX", "CPX", AddressingMode.ZP0, 3),
    ("SBC", "SBC", AddressingMode.ZP0, 3),
    ("INC", "INC", AddressingMode.ZP0, 5),
    ("???", "XXX", AddressingMode.IMP, 5),
    ("INX", "INX", AddressingMode.IMP, 2),
    ("SBC", "SBC", AddressingMode.IMM, 2),
    ("NOP", "NOP", AddressingMode.IMP, 2),
    ("???", "SBC", AddressingMode.IMP, 2),
    ("CPX", "CPX", AddressingMode.ABS, 4),
    ("SBC", "SBC", AddressingMode.ABS, 4),
    ("INC", "INC", AddressingMode.ABS, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    # 0xF0
    ("BEQ", "BEQ", AddressingMode.REL, 2),
    ("SBC", "SBC", AddressingMode.IZY, 5),
    ("???", "XXX", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 8),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("SBC", "SBC", AddressingMode.ZPX, 4),
    ("INC", "INC", AddressingMode.ZPX, 6),
    ("???", "XXX", AddressingMode.IMP, 6),
    ("SED", "SED", AddressingMode.IMP, 2),
    ("SBC", "SBC", AddressingMode.ABY, 4),
    ("NOP", "NOP", AddressingMode.IMP, 2),
    ("???", "XXX", AddressingMode.IMP, 7),
    ("???", "NOP", AddressingMode.IMP, 4),
    ("SBC", "SBC", AddressingMode.ABX, 4),
    ("INC", "INC", AddressingMode.ABX, 7),
    ("???", "XXX", AddressingMode.IMP, 7),
)


LOOKUP_TABLE: LookupTable = build_lookup_table(DEFAULT_ROWS)
