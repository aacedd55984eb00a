# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for JSON snapshots of parsed documents."""

import json
from pathlib import Path

import pytest

from wsdlview.export.snapshot import (
    SNAPSHOT_FORMAT_VERSION,
    deserialize,
    read_snapshot,
    serialize,
    snapshot_path_for,
    write_snapshot,
)
from wsdlview.model import WsdlDocument
from wsdlview.parser import parse

_SAMPLE = Path(__file__).parent.parent / "data" / "calculator.wsdl"


@pytest.fixture
def document() -> WsdlDocument:
    result = parse(_SAMPLE.read_text(encoding="utf-8"))
    assert result.document is not None
    return result.document


def test_snapshot_restores_the_parsed_document(document: WsdlDocument, tmp_path: Path) -> None:
    path = tmp_path / "out" / "calculator.wsdl.json"
    write_snapshot(document, path)
    assert read_snapshot(path) == document


def test_snapshot_is_versioned_and_compact(document: WsdlDocument) -> None:
    text = serialize(document)
    obj = json.loads(text)
    assert json.dumps(obj, separators=(",", ":")) == text
    assert obj["v"] == SNAPSHOT_FORMAT_VERSION
    assert obj["document"]["target_namespace"] == "http://example.com/calculator"
    # None values are left out.
    assert "restrictions" not in obj["document"]["types"][0]


def test_snapshot_without_source(document: WsdlDocument) -> None:
    obj = json.loads(serialize(document, include_source=False))
    assert "raw_xml" not in obj["document"]
    restored = deserialize(json.dumps(obj))
    assert restored.raw_xml == ""
    assert restored.services == document.services


@pytest.mark.parametrize("data", ['{"v": "0", "document": {}}', "[]", "{}"])
def test_unknown_version_is_rejected(data: str) -> None:
    with pytest.raises(ValueError, match="Unsupported snapshot format version"):
        deserialize(data)


def test_invalid_document_is_rejected() -> None:
    with pytest.raises(ValueError):
        deserialize('{"v": "1", "document": {"services": "nope"}}')


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("calculator.wsdl", "calculator.wsdl.json"),
        ("dir/Service.WSDL", "Service.wsdl.json"),
        ("https://example.com/api/Calc?wsdl", "Calc.wsdl.json"),
        ("https://example.com/", "example.com.wsdl.json"),
    ],
)
def test_snapshot_path_for(source: str, expected: str) -> None:
    assert snapshot_path_for(source) == Path(expected)
