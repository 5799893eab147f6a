from __future__ import annotations

import pytest

from py6502defs import cli
from py6502defs.codegen import LegacyEmitter, TableEmitter
from py6502defs.cpu import LOOKUP_TABLE


def test_default_mode_prints_table(capsys) -> None:
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert out == TableEmitter().render(LOOKUP_TABLE)
    assert out.startswith("build_definitions![\n    (X00_BRK, 0x00, 7, Cpu::imm, Cpu::brk),\n")


def test_legacy_mode(capsys) -> None:
    assert cli.main(["legacy"]) == 0
    assert capsys.readouterr().out == LegacyEmitter().render(LOOKUP_TABLE)


def test_unknown_mode_falls_back_to_table(capsys) -> None:
    assert cli.main(["v1"]) == 0
    assert capsys.readouterr().out == TableEmitter().render(LOOKUP_TABLE)


def test_runs_are_byte_identical(capsys) -> None:
    cli.main(["table"])
    first = capsys.readouterr().out
    cli.main(["table"])
    assert capsys.readouterr().out == first


def test_naming_options(capsys) -> None:
    assert cli.main(["table", "--owner", "Core", "--macro", "opcodes"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("opcodes![\n    (X00_BRK, 0x00, 7, Core::imm, Core::brk),\n")


def test_invalid_owner_is_rejected(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--owner", "not valid"])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "handler_owner" in captured.err


def test_mode_names_are_exact(capsys) -> None:
    assert cli.main(["LEGACY"]) == 0
    assert capsys.readouterr().out == TableEmitter().render(LOOKUP_TABLE)


def test_partial_table_exits_without_output(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["legacy"], table=list(LOOKUP_TABLE)[:255])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "py6502defs: lookup table needs 256 entries, got 255" in captured.err


def test_run_script_wraps_cli() -> None:
    import run

    assert run.main is cli.main
