# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Single-pass WSDL parser.

Converts WSDL source text into a :class:`~wsdlview.model.entities.WsdlDocument`.
The parser is lenient: missing names fall back to defaults, undeclared prefixes
are tolerated, and absent bindings simply leave SOAP details empty. It never
raises; every failure is reported through :class:`ParseResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wsdlview.model.entities import WsdlDocument
from wsdlview.parser.namespaces import NamespaceTable
from wsdlview.parser.schema import parse_types
from wsdlview.parser.sections import (
    documentation_of,
    parse_bindings,
    parse_imports,
    parse_messages,
    parse_port_types,
    parse_services,
)
from wsdlview.parser.tree import DocumentLoadError, XmlNode, load_document

# ###############
# Public Interface
# ###############

# Root element names of WSDL 1.1 and WSDL 2.0 documents.
WSDL_ROOT_NAMES: tuple[str, ...] = ("definitions", "description")


@dataclass
class ParseResult:
    """Outcome of parsing one WSDL document.

    Attributes:
        success: True if a document was produced.
        document: The parsed document; None whenever ``success`` is False.
        errors: Fatal problems; empty on success.
        warnings: Recoverable anomalies; may be non-empty on success.
    """

    success: bool
    document: WsdlDocument | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal errors were reported."""
        return len(self.errors) > 0


class WsdlParser:
    """Parses WSDL documents.

    All state is scoped to a single :meth:`parse` call and reset at its
    start, so one instance can be reused for any number of inputs.
    """

    def __init__(self) -> None:
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._namespaces = NamespaceTable()

    def parse(self, xml_text: str) -> ParseResult:
        """Parse WSDL source text.

        Args:
            xml_text: The complete XML document.

        Returns:
            A successful :class:`ParseResult` carrying the document, or a
            failed one carrying the errors. Unexpected exceptions raised while
            traversing the document are reported as an ``Unexpected error``.
        """
        self._errors = []
        self._warnings = []
        self._namespaces = NamespaceTable()

        try:
            try:
                root = load_document(xml_text)
            except DocumentLoadError as exc:
                return self._fail(f"XML Parse Error: {exc}")

            if root is None:
                return self._fail("No root element found in document")

            if root.local_name not in WSDL_ROOT_NAMES:
                return self._fail(
                    f'Invalid WSDL document: root element is "{root.local_name}", '
                    'expected "definitions" or "description"'
                )

            self._namespaces = NamespaceTable.from_root(root)
            document = self._parse_document(root, xml_text)
        except Exception as exc:
            return self._fail(f"Unexpected error: {exc}")

        return ParseResult(
            success=True,
            document=document,
            errors=list(self._errors),
            warnings=list(self._warnings),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fail(self, message: str) -> ParseResult:
        self._errors.append(message)
        return ParseResult(success=False, errors=list(self._errors), warnings=list(self._warnings))

    def _parse_document(self, root: XmlNode, xml_text: str) -> WsdlDocument:
        ns = self._namespaces
        return WsdlDocument(
            target_namespace=root.attr("targetNamespace") or "",
            services=parse_services(root, ns),
            port_types=parse_port_types(root, ns),
            bindings=parse_bindings(root, ns),
            messages=parse_messages(root, ns),
            types=parse_types(root, ns),
            imports=parse_imports(root),
            documentation=documentation_of(root),
            raw_xml=xml_text,
        )


def parse(xml_text: str) -> ParseResult:
    """Parse WSDL source text with a fresh :class:`WsdlParser`.

    Args:
        xml_text: The complete XML document.

    Returns:
        The :class:`ParseResult`. This function never raises.
    """
    return WsdlParser().parse(xml_text)
