from __future__ import annotations

import io

import pytest

from py6502defs.codegen import (
    DEFAULT_MODE,
    EmitMode,
    EmitterConfig,
    LegacyEmitter,
    TableEmitter,
    create_emitter,
    emit_definitions,
)
from py6502defs.cpu import LOOKUP_TABLE


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("legacy", EmitMode.LEGACY),
        ("LEGACY", EmitMode.TABLE),
        (" legacy ", EmitMode.TABLE),
        ("table", EmitMode.TABLE),
        ("v1", EmitMode.TABLE),
        ("", EmitMode.TABLE),
        (None, EmitMode.TABLE),
        (EmitMode.LEGACY, EmitMode.LEGACY),
    ],
)
def test_parse_mode(value, expected) -> None:
    assert EmitMode.parse(value) is expected


def test_default_mode_is_table() -> None:
    assert DEFAULT_MODE is EmitMode.TABLE
    assert isinstance(create_emitter(), TableEmitter)


def test_create_emitter_passes_config() -> None:
    config = EmitterConfig(handler_owner="Core")
    emitter = create_emitter("legacy", config)
    assert isinstance(emitter, LegacyEmitter)
    assert emitter.config is config


def test_emit_definitions_per_mode() -> None:
    legacy, table = io.StringIO(), io.StringIO()
    assert emit_definitions(legacy, "legacy") == 153
    assert emit_definitions(table) == 256
    assert legacy.getvalue() == LegacyEmitter().render(LOOKUP_TABLE)
    assert table.getvalue() == TableEmitter().render(LOOKUP_TABLE)


def test_unknown_mode_matches_table_output() -> None:
    unknown, table = io.StringIO(), io.StringIO()
    emit_definitions(unknown, "bogus")
    emit_definitions(table, EmitMode.TABLE)
    assert unknown.getvalue() == table.getvalue()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"handler_owner": "Cpu::inner"},
        {"struct_name": "1abc"},
        {"macro_name": ""},
        {"indent": "--"},
    ],
)
def test_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        EmitterConfig(**kwargs)
