from __future__ import annotations

import io
import re
from pathlib import Path

from py6502defs.codegen import EmitterConfig, TableEmitter
from py6502defs.cpu import LOOKUP_TABLE, AddressingMode, Instruction, LookupTable

ENTRY = re.compile(
    r"^    \(X(?P<hex>[0-9A-F]{2})_(?P<name>[A-Z0-9?]+), 0x(?P<opcode>[0-9A-F]{2}), "
    r"(?P<cycles>\d+), Cpu::(?P<mode>\w+), Cpu::(?P<operation>\w+)\),$"
)


def _render() -> list[str]:
    return TableEmitter().render(LOOKUP_TABLE).splitlines()


def _entries() -> list[re.Match]:
    lines = _render()[1:-1]
    matches = [ENTRY.match(line) for line in lines]
    assert all(matches), [line for line, match in zip(lines, matches) if match is None]
    return matches


def test_single_open_and_close_marker() -> None:
    lines = _render()
    assert lines[0] == "build_definitions!["
    assert lines[-1] == "];"
    assert len(lines) == 258
    assert sum(1 for line in lines if line == "build_definitions![") == 1
    assert sum(1 for line in lines if line == "];") == 1


def test_every_opcode_once_in_ascending_order() -> None:
    opcodes = [int(match["opcode"], 16) for match in _entries()]
    assert opcodes == list(range(256))
    for match in _entries():
        assert match["hex"] == match["opcode"]


def test_brk_line() -> None:
    assert _render()[1] == "    (X00_BRK, 0x00, 7, Cpu::imm, Cpu::brk),"


def test_illegal_opcode_uses_placeholder_and_nop() -> None:
    line = _render()[1 + 0x02]
    assert line == "    (X02_XXX, 0x02, 2, Cpu::imp, Cpu::nop),"


def test_unassigned_mnemonic_keeps_real_operation() -> None:
    assert _render()[1 + 0xEB] == "    (XEB_XXX, 0xEB, 2, Cpu::imp, Cpu::sbc),"
    assert _render()[1 + 0x04] == "    (X04_XXX, 0x04, 3, Cpu::imp, Cpu::nop),"


def test_sentinels_never_emitted() -> None:
    for match in _entries():
        assert match["name"] != "???"
        assert match["operation"] != "xxx"
        assert match["operation"] != "???"


def test_case_law() -> None:
    for match in _entries():
        assert match["mode"] == match["mode"].lower()
        assert match["operation"] == match["operation"].lower()
        assert match["name"] == match["name"].upper()


def test_named_opcode_with_illegal_operation_binds_nop() -> None:
    entries = [
        Instruction(opcode, "???", "NOP", AddressingMode.IMP, 2) for opcode in range(256)
    ]
    entries[0x10] = Instruction(0x10, "FOO", "XXX", AddressingMode.REL, 3)
    text = TableEmitter().render(LookupTable(entries))
    assert "    (X10_FOO, 0x10, 3, Cpu::rel, Cpu::nop),\n" in text


def test_render_is_deterministic() -> None:
    emitter = TableEmitter()
    assert emitter.render(LOOKUP_TABLE) == emitter.render(LOOKUP_TABLE)
    assert TableEmitter().render(LOOKUP_TABLE) == emitter.render(LOOKUP_TABLE)


def test_emit_writes_rendered_text() -> None:
    stream = io.StringIO()
    count = TableEmitter().emit(LOOKUP_TABLE, stream)
    assert count == 256
    assert stream.getvalue() == TableEmitter().render(LOOKUP_TABLE)
    assert stream.getvalue().endswith("];\n")


def test_custom_names() -> None:
    config = EmitterConfig(handler_owner="Mos6502", macro_name="opcodes")
    lines = TableEmitter(config).render(LOOKUP_TABLE).splitlines()
    assert lines[0] == "opcodes!["
    assert lines[1] == "    (X00_BRK, 0x00, 7, Mos6502::imm, Mos6502::brk),"


def test_render_matches_reference_output() -> None:
    path = Path(__file__).resolve().parents[1] / "fixtures" / "table_mode.txt"
    assert TableEmitter().render(LOOKUP_TABLE) == path.read_text(encoding="ascii")
