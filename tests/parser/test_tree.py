# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the element tree wrapper used by the extractors."""

import pytest

from wsdlview.parser.tree import DocumentLoadError, XmlNode, load_document

# ###############
# Helpers
# ###############


def _load(source: str) -> XmlNode:
    root = load_document(source)
    assert root is not None
    return root


# ###############
# Loading
# ###############


def test_load_returns_root() -> None:
    root = _load('<a:root xmlns:a="urn:a"/>')
    assert root.local_name == "root"
    assert root.namespace == "urn:a"


def test_unqualified_root_has_empty_namespace() -> None:
    assert _load("<root/>").namespace == ""


def test_malformed_xml_raises_load_error() -> None:
    with pytest.raises(DocumentLoadError):
        load_document("<root><unclosed></root>")


def test_empty_text_raises_load_error() -> None:
    with pytest.raises(DocumentLoadError):
        load_document("")


def test_xml_declaration_is_accepted() -> None:
    root = _load('<?xml version="1.0" encoding="UTF-8"?>\n<root/>')
    assert root.local_name == "root"


@pytest.mark.parametrize("encoding", ["ISO-8859-1", "UTF-16", "windows-1252"])
def test_declared_encoding_does_not_alter_decoded_text(encoding: str) -> None:
    root = _load(
        f'<?xml version="1.0" encoding="{encoding}"?>\n'
        "<root><documentation>Café service</documentation></root>"
    )
    doc = root.first_child("documentation")
    assert doc is not None
    assert doc.text() == "Café service"


def test_external_entities_are_not_resolved(tmp_path) -> None:
    secret = tmp_path / "secret.txt"
    secret.write_text("top secret", encoding="utf-8")
    source = (
        f'<!DOCTYPE root [<!ENTITY leak SYSTEM "file://{secret}">]>'
        "<root><documentation>&leak;</documentation></root>"
    )
    root = _load(source)
    doc = root.first_child("documentation")
    assert doc is not None
    assert "top secret" not in doc.text()


# ###############
# Navigation
# ###############


def test_children_are_matched_by_local_name_only() -> None:
    root = _load('<root xmlns:x="urn:x" xmlns:y="urn:y"><x:item n="1"/><y:item n="2"/><other/></root>')
    items = root.children_named("item")
    assert [i.attr("n") for i in items] == ["1", "2"]
    assert [i.namespace for i in items] == ["urn:x", "urn:y"]


def test_first_child_returns_first_match_or_none() -> None:
    root = _load('<root><item n="1"/><item n="2"/></root>')
    first = root.first_child("item")
    assert first is not None
    assert first.attr("n") == "1"
    assert root.first_child("missing") is None


def test_comments_and_processing_instructions_are_skipped() -> None:
    root = _load("<root><!-- note --><?pi data?><item/></root>")
    assert [c.local_name for c in root.children()] == ["item"]


def test_children_are_direct_only() -> None:
    root = _load("<root><wrapper><item/></wrapper></root>")
    assert root.children_named("item") == []


def test_missing_attribute_is_none() -> None:
    root = _load('<root name="x"/>')
    assert root.attr("name") == "x"
    assert root.attr("other") is None


def test_text_concatenates_descendants() -> None:
    root = _load("<root>Hello <b>big</b> world</root>")
    assert root.text() == "Hello big world"


def test_declared_namespaces_map_default_to_empty_prefix() -> None:
    root = _load('<root xmlns="urn:default" xmlns:p="urn:p"/>')
    assert root.declared_namespaces == {"": "urn:default", "p": "urn:p"}
