"""Command-line interface for the 6502 declaration generator.

Prints the instruction declarations for the 6502 lookup table to stdout,
either as per-opcode constants (``legacy``) or as a single macro table
(``table``, the default).
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from py6502defs.codegen import DEFAULT_MODE, EmitMode, EmitterConfig, emit_definitions
from py6502defs.cpu import LOOKUP_TABLE, Instruction, OpcodeTableError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py6502defs",
        description="Generate 6502 instruction declarations from the opcode table",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default=DEFAULT_MODE.value,
        help=(
            "Output format: 'legacy' or 'table' (default: table). "
            "Any other value falls back to 'table'."
        ),
    )
    parser.add_argument(
        "--owner",
        default=EmitterConfig.handler_owner,
        help="Type that owns the handler functions (default: Cpu)",
    )
    parser.add_argument(
        "--struct",
        default=EmitterConfig.struct_name,
        help="Struct name used by legacy declarations (default: Instruction)",
    )
    parser.add_argument(
        "--macro",
        default=EmitterConfig.macro_name,
        help="Macro name wrapping the table output (default: build_definitions)",
    )
    return parser


def main(argv: list[str] | None = None, table: Sequence[Instruction] = LOOKUP_TABLE) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = EmitterConfig(
            handler_owner=args.owner,
            struct_name=args.struct,
            macro_name=args.macro,
        )
    except ValueError as exc:
        parser.error(str(exc))

    mode = EmitMode.parse(args.mode)
    try:
        emit_definitions(sys.stdout, mode, table, config)
    except OpcodeTableError as exc:
        parser.exit(1, f"{parser.prog}: {exc}\n")
    return 0
