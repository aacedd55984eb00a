# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only element tree used by the WSDL section extractors.

Extractors only ever ask three questions of an element: which children have a
given local name, which is the first such child, and what is the value of an
attribute. :class:`XmlNode` answers exactly those (plus text and namespace
access) over an ``lxml`` element, so the rest of the parser never touches
``lxml`` directly.
"""

from __future__ import annotations

from collections.abc import Iterator

from lxml import etree

# ###############
# Public Interface
# ###############


class DocumentLoadError(Exception):
    """Raised when the source text is not well-formed XML."""


class XmlNode:
    """An element of a parsed XML document, addressed by local name."""

    __slots__ = ("_element",)

    def __init__(self, element: etree._Element) -> None:
        self._element = element

    @property
    def local_name(self) -> str:
        """The element name without its namespace."""
        return etree.QName(self._element).localname

    @property
    def namespace(self) -> str:
        """The namespace URI of the element, or an empty string."""
        return etree.QName(self._element).namespace or ""

    @property
    def declared_namespaces(self) -> dict[str, str]:
        """Prefix to URI bindings in scope on this element.

        The default namespace is reported under the empty-string prefix.
        """
        return {prefix or "": uri for prefix, uri in self._element.nsmap.items()}

    def attr(self, name: str) -> str | None:
        """Return the value of an unqualified attribute, or None if absent."""
        return self._element.get(name)

    def children(self) -> Iterator[XmlNode]:
        """Iterate over child elements in document order, skipping comments and PIs."""
        for child in self._element:
            if isinstance(child.tag, str):
                yield XmlNode(child)

    def children_named(self, local_name: str) -> list[XmlNode]:
        """Return all child elements with the given local name."""
        return [child for child in self.children() if child.local_name == local_name]

    def first_child(self, local_name: str) -> XmlNode | None:
        """Return the first child element with the given local name, or None."""
        for child in self.children():
            if child.local_name == local_name:
                return child
        return None

    def text(self) -> str:
        """Return the concatenated text content of the element and its descendants."""
        return "".join(self._element.itertext())

    def __repr__(self) -> str:
        return f"XmlNode({self.local_name!r})"


def load_document(source: str) -> XmlNode | None:
    """Parse XML source text and return its root element.

    External entities and network access are disabled; the document is parsed
    entirely from *source*. The text is already decoded, so an ``encoding``
    named in the XML declaration is ignored.

    Args:
        source: The complete XML document text.

    Returns:
        The root element, or None if the parser produced no root.

    Raises:
        DocumentLoadError: If the text is not well-formed XML.
    """
    parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(source.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise DocumentLoadError(str(exc)) from exc
    if root is None:
        return None
    return XmlNode(root)
