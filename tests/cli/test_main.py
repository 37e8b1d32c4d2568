# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schematype CLI entry point."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from schematype.artifact import read_artifact
from schematype.cli.main import main
from schematype.model.descriptors import EnumMemberDefault, EnumTypeRef
from schematype.registry.symbols import SymbolRegistry, set_default_registry

# ###############
# Helpers
# ###############


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run the CLI with *argv* and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["schematype", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    code = exc_info.value.code
    return code if isinstance(code, int) else 0


def _write_schema(tmp_path: Path, data: dict[str, object], name: str = "sampler.schema.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# -------- general --------


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- resolve tests --------


def test_resolve_prints_descriptor(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    schema = _write_schema(tmp_path, {"type": "string", "enum": ["OPAQUE", "MASK"], "default": "MASK"})
    assert _run(monkeypatch, "resolve", str(schema), "--name", "AlphaMode") == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["descriptor"]["type"] == {"kind": "enum", "name": "AlphaModeEnum"}
    assert payload["descriptor"]["default"]["member"] == "MASK"


def test_resolve_name_from_title(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    schema = _write_schema(tmp_path, {"type": "string", "enum": ["a"], "title": "Alpha Mode"})
    assert _run(monkeypatch, "resolve", str(schema)) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["descriptor"]["type"]["name"] == "AlphaModeEnum"


def test_resolve_name_from_file_name(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    schema = _write_schema(tmp_path, {"type": "string", "enum": ["a"]}, name="texture_info.schema.json")
    assert _run(monkeypatch, "resolve", str(schema)) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["descriptor"]["type"]["name"] == "TextureInfoEnum"


def test_resolve_writes_output_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    set_default_registry(SymbolRegistry({9728: "NEAREST", 9729: "LINEAR"}))
    schema = _write_schema(tmp_path, {"type": "integer", "enum": [9728, 9729], "default": 9728})
    output = tmp_path / "build" / "Filter.type.json"
    assert _run(monkeypatch, "resolve", str(schema), "--name", "Filter", "--output", str(output)) == 0
    descriptor = read_artifact(output)
    assert descriptor.type == EnumTypeRef(name="FilterEnum")
    assert descriptor.default == EnumMemberDefault(enum_name="FilterEnum", member="NEAREST")


def test_resolve_with_registry_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    registry = tmp_path / "gl.xml"
    registry.write_text('<registry><enum value="0x2600" name="GL_NEAREST"/></registry>', encoding="utf-8")
    schema = _write_schema(tmp_path, {"type": "integer", "enum": [9728]})
    with patch("requests.get") as mock_get:
        assert _run(monkeypatch, "resolve", str(schema), "--registry", str(registry)) == 0
    mock_get.assert_not_called()
    payload = json.loads(capsys.readouterr().out)
    assert payload["descriptor"]["dependent_type"]["members"] == [{"name": "NEAREST", "value": 9728}]


def test_resolve_with_config_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "schematype.yaml"
    config.write_text("enum-suffix: Kind\n", encoding="utf-8")
    schema = _write_schema(tmp_path, {"type": "string", "enum": ["a"]})
    assert _run(monkeypatch, "resolve", str(schema), "--name", "Mode", "--config", str(config)) == 0
    assert json.loads(capsys.readouterr().out)["descriptor"]["type"]["name"] == "ModeKind"


def test_resolve_reports_resolution_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    schema = _write_schema(tmp_path, {"type": "string", "enum": ["a"], "default": "b"})
    assert _run(monkeypatch, "resolve", str(schema), "--name", "Mode") == 1
    assert "not in the enum list" in capsys.readouterr().err


def test_resolve_reports_unwritable_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    schema = _write_schema(tmp_path, {"type": "string"})
    output = blocker / "out.type.json"
    assert _run(monkeypatch, "resolve", str(schema), "--name", "Mode", "--output", str(output)) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error:")
    assert "Wrote type descriptor" not in captured.out


def test_resolve_reports_missing_schema(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "resolve", str(tmp_path / "missing.json")) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_resolve_reports_invalid_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "schematype.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")
    schema = _write_schema(tmp_path, {"type": "string"})
    assert _run(monkeypatch, "resolve", str(schema), "--config", str(config)) == 1
    assert "unknown field" in capsys.readouterr().err


# -------- symbols tests --------


def test_symbols_prints_names(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    set_default_registry(SymbolRegistry({9728: "NEAREST", 9729: "LINEAR"}))
    assert _run(monkeypatch, "symbols", "9728", "0x2601") == 0
    assert capsys.readouterr().out.splitlines() == ["9728 NEAREST", "9729 LINEAR"]


def test_symbols_unknown_value(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    set_default_registry(SymbolRegistry({9728: "NEAREST"}))
    assert _run(monkeypatch, "symbols", "9728", "7") == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["9728 NEAREST"]
    assert "No symbol registered for value 7" in captured.err


def test_symbols_unavailable_registry(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "symbols", "1", "--registry", str(tmp_path / "missing.xml")) == 1
    assert "Cannot read symbol registry" in capsys.readouterr().err


def test_symbols_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "symbols", "linear") == 2


# -------- logging --------


def test_verbose_enables_debug_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    schema = _write_schema(tmp_path, {"type": "boolean"})
    with patch("schematype.cli.main.configure_logging") as mock_configure:
        assert _run(monkeypatch, "-v", "resolve", str(schema)) == 0
    mock_configure.assert_called_once_with(verbose=True)
