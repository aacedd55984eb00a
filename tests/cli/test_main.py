# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the wsdlview CLI entry point."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from wsdlview.cli.main import main

# ###############
# Public Interface
# ###############

_SAMPLE = str(Path(__file__).parent.parent / "data" / "calculator.wsdl")


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["wsdlview", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the source cache of every test inside its own temporary directory."""
    monkeypatch.chdir(tmp_path)


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- show tests --------


def test_show_prints_summary(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """show prints the namespace, services, and ports of the document."""
    assert _run(monkeypatch, "show", _SAMPLE) == 0
    out = capsys.readouterr().out
    assert "Target namespace: http://example.com/calculator" in out
    assert "CalculatorSoapPort [SOAP 1.1]" in out
    assert "CalculatorSoap12Port [SOAP 1.2]" in out
    assert "import http://example.com/common from common.wsdl" in out


def test_show_missing_file_fails(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """show exits with code 1 and reports the read error."""
    assert _run(monkeypatch, "show", "absent.wsdl") == 1
    assert "Error: Error reading file" in capsys.readouterr().err


def test_show_invalid_document_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """show exits with code 1 when the root element is not a WSDL root."""
    (tmp_path / "bad.wsdl").write_text("<schema/>", encoding="utf-8")
    assert _run(monkeypatch, "show", "bad.wsdl") == 1
    assert 'Error: Invalid WSDL document: root element is "schema"' in capsys.readouterr().err


def test_show_without_source_uses_cache(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """show without SOURCE re-parses the last successfully parsed source."""
    assert _run(monkeypatch, "show", _SAMPLE) == 0
    capsys.readouterr()
    assert _run(monkeypatch, "show") == 0
    assert "Target namespace: http://example.com/calculator" in capsys.readouterr().out


def test_show_without_source_or_cache_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """show without SOURCE fails when nothing has been cached."""
    assert _run(monkeypatch, "show") == 1
    assert "no SOURCE given and no cached source available" in capsys.readouterr().err


# -------- listing tests --------


def test_operations_lists_each_port(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """operations prints one line per exposing port."""
    assert _run(monkeypatch, "operations", _SAMPLE) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Calculator/CalculatorSoapPort: Add action=http://example.com/calculator/Add in=AddRequest out=AddResponse",
        "Calculator/CalculatorSoap12Port: Add action=http://example.com/calculator/Add in=AddRequest out=AddResponse",
    ]


def test_types_lists_fields(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """types prints each type with its formatted fields."""
    assert _run(monkeypatch, "types", _SAMPLE) == 0
    out = capsys.readouterr().out
    assert "Operands (complexType)" in out
    assert "  - note (optional): string" in out
    assert "  - @precision: int" in out
    assert "  values: UP, DOWN" in out
    assert "CalculatorFault (element) : string" in out


def test_messages_lists_parts(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """messages prints each message with its parts."""
    assert _run(monkeypatch, "messages", _SAMPLE) == 0
    out = capsys.readouterr().out
    assert "AddRequest\n  - parameters: element=Add\n" in out


def test_refs_for_type(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """refs lists direct references before indirect ones."""
    assert _run(monkeypatch, "refs", "Add", _SAMPLE) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "message AddRequest (part: parameters)",
        "operation Add (input) [indirect]",
    ]


def test_refs_for_message(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """refs lists the operations using a message."""
    assert _run(monkeypatch, "refs", "AddResponse", _SAMPLE) == 0
    out = capsys.readouterr().out
    assert "operation Add (output)" in out


def test_refs_unknown_name(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """refs reports when nothing references the name."""
    assert _run(monkeypatch, "refs", "Nothing", _SAMPLE) == 0
    assert "No references to 'Nothing'." in capsys.readouterr().out


# -------- export tests --------


def test_export_writes_default_snapshot(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """export writes <source name>.wsdl.json into the current directory."""
    assert _run(monkeypatch, "export", _SAMPLE) == 0
    data = json.loads((tmp_path / "calculator.wsdl.json").read_text(encoding="utf-8"))
    assert data["document"]["target_namespace"] == "http://example.com/calculator"
    assert "raw_xml" in data["document"]


def test_export_custom_output_without_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """export honours --output and --no-source."""
    assert _run(monkeypatch, "export", _SAMPLE, "-o", "out/snap.json", "--no-source") == 0
    data = json.loads((tmp_path / "out" / "snap.json").read_text(encoding="utf-8"))
    assert "raw_xml" not in data["document"]


# -------- serve tests --------


def test_serve_launches_app(monkeypatch: pytest.MonkeyPatch) -> None:
    """serve creates and runs the web app for the parsed document."""
    mock_app = MagicMock()
    with patch("wsdlview.webui.app.create_app", return_value=mock_app) as mock_create:
        assert _run(monkeypatch, "serve", _SAMPLE) == 0
    assert mock_create.call_args.kwargs["source_label"] == _SAMPLE
    mock_app.run.assert_called_once_with(host="127.0.0.1", port=8050, debug=False)


def test_serve_custom_host_and_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """serve passes custom host and port to the app."""
    mock_app = MagicMock()
    with patch("wsdlview.webui.app.create_app", return_value=mock_app):
        assert _run(monkeypatch, "serve", "--host", "0.0.0.0", "--port", "9000", _SAMPLE) == 0
    mock_app.run.assert_called_once_with(host="0.0.0.0", port=9000, debug=False)


def test_serve_fails_without_document(monkeypatch: pytest.MonkeyPatch) -> None:
    """serve exits with code 1 when the source cannot be loaded."""
    with patch("wsdlview.webui.app.create_app") as mock_create:
        assert _run(monkeypatch, "serve", "absent.wsdl") == 1
    mock_create.assert_not_called()


# -------- config and cache tests --------


def test_config_cache_file_is_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The cache-file setting controls where the last source is stored."""
    (tmp_path / ".wsdlview.yaml").write_text("cache-file: store/latest.wsdl\n", encoding="utf-8")
    assert _run(monkeypatch, "show", _SAMPLE) == 0
    assert (tmp_path / "store" / "latest.wsdl").exists()


def test_invalid_config_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """An invalid configuration file is reported and the command fails."""
    config = tmp_path / "custom.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")
    assert _run(monkeypatch, "--config", str(config), "show", _SAMPLE) == 1
    assert "unknown field(s): colour" in capsys.readouterr().err


def test_explicit_missing_config_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--config naming a missing file is an error."""
    assert _run(monkeypatch, "--config", str(tmp_path / "absent.yaml"), "show", _SAMPLE) == 1


def test_clear_forgets_cached_source(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """clear removes the cached source so later commands need SOURCE again."""
    assert _run(monkeypatch, "show", _SAMPLE) == 0
    assert _run(monkeypatch, "clear") == 0
    assert "Cached source cleared." in capsys.readouterr().out
    assert _run(monkeypatch, "show") == 1
