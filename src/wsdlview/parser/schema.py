# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction of XML Schema definitions from the WSDL ``types`` section.

Only the constructs needed to describe message shapes are read: named complex
types, named simple types, and top-level elements. Nested ``sequence``,
``choice`` and ``all`` groups are flattened into one ordered field list.
"""

from __future__ import annotations

import re
from typing import Any

from wsdlview.model.types import (
    ANY_TYPE,
    INLINE_TYPE_PREFIX,
    UNBOUNDED,
    Restriction,
    TypeField,
    TypeKind,
    WsdlType,
)
from wsdlview.parser.namespaces import NamespaceTable
from wsdlview.parser.sections import documentation_of
from wsdlview.parser.tree import XmlNode

# ###############
# Public Interface
# ###############

ANONYMOUS_NAME = "Anonymous"

# Field containers in the order of precedence used when several are present.
FIELD_CONTAINERS: tuple[str, ...] = ("sequence", "all", "choice")


def parse_types(root: XmlNode, namespaces: NamespaceTable) -> list[WsdlType]:
    """Extract the type definitions of every ``schema`` inside the first ``types`` element.

    Within each schema, complex types come first, then simple types, then
    top-level elements, each group in document order. Elements that neither
    reference a type nor define one inline are left out.
    """
    types_el = root.first_child("types")
    if types_el is None:
        return []

    parser = _SchemaParser(namespaces)
    result: list[WsdlType] = []
    for schema in types_el.children_named("schema"):
        target_ns = schema.attr("targetNamespace") or ""
        for node in schema.children_named("complexType"):
            result.append(parser.parse_complex_type(node, target_ns))
        for node in schema.children_named("simpleType"):
            result.append(parser.parse_simple_type(node, target_ns))
        for node in schema.children_named("element"):
            element_type = parser.parse_element(node, target_ns)
            if element_type is not None:
                result.append(element_type)
    return result


# ################
# Implementation
# ################

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: str | None) -> int | None:
    """Parse the leading integer of *value*, or return None if there is none."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _parse_max_occurs(value: str | None) -> int | str:
    if value == UNBOUNDED:
        return UNBOUNDED
    parsed = _parse_int(value)
    return 1 if parsed is None else parsed


def _first_container(node: XmlNode) -> XmlNode | None:
    for name in FIELD_CONTAINERS:
        container = node.first_child(name)
        if container is not None:
            return container
    return None


class _SchemaParser:
    """Builds WsdlType values from schema elements of one document."""

    def __init__(self, namespaces: NamespaceTable) -> None:
        self._ns = namespaces

    # ------------------------------------------------------------------
    # Named definitions
    # ------------------------------------------------------------------

    def parse_complex_type(self, node: XmlNode, namespace: str) -> WsdlType:
        """Parse a ``complexType``: its field group, content model, and attributes."""
        fields: list[TypeField] = []
        base: str | None = None

        container = _first_container(node)
        if container is not None:
            fields.extend(self._parse_fields(container))

        complex_content = node.first_child("complexContent")
        if complex_content is not None:
            derivation = complex_content.first_child("extension") or complex_content.first_child("restriction")
            if derivation is not None:
                base = self._resolve_attr(derivation, "base") or base
                inner = _first_container(derivation)
                if inner is not None:
                    fields.extend(self._parse_fields(inner))
                fields.extend(self._parse_attributes(derivation))

        simple_content = node.first_child("simpleContent")
        if simple_content is not None:
            derivation = simple_content.first_child("extension") or simple_content.first_child("restriction")
            if derivation is not None:
                base = self._resolve_attr(derivation, "base") or base
                fields.extend(self._parse_attributes(derivation))

        fields.extend(self._parse_attributes(node))

        return WsdlType(
            name=node.attr("name") or ANONYMOUS_NAME,
            kind=TypeKind.COMPLEX_TYPE,
            documentation=documentation_of(node),
            namespace=namespace,
            base=base,
            fields=fields,
        )

    def parse_simple_type(self, node: XmlNode, namespace: str) -> WsdlType:
        """Parse a ``simpleType`` defined by restriction, union, or list."""
        base: str | None = None
        restrictions: Restriction | None = None

        restriction = node.first_child("restriction")
        if restriction is not None:
            base = self._resolve_attr(restriction, "base")
            restrictions = self._parse_restriction(restriction, base or "string")

        union = node.first_child("union")
        if union is not None:
            member_types = union.attr("memberTypes")
            if member_types:
                members = ", ".join(self._ns.local_name(token) for token in member_types.split())
                base = f"union({members})"

        item_list = node.first_child("list")
        if item_list is not None:
            item_type = item_list.attr("itemType")
            if item_type:
                base = f"list({self._ns.local_name(item_type)})"

        return WsdlType(
            name=node.attr("name") or ANONYMOUS_NAME,
            kind=TypeKind.SIMPLE_TYPE,
            documentation=documentation_of(node),
            namespace=namespace,
            base=base,
            restrictions=restrictions,
        )

    def parse_element(self, node: XmlNode, namespace: str) -> WsdlType | None:
        """Parse a top-level ``element``; returns None if it has no name or no type."""
        name = node.attr("name")
        if not name:
            return None

        inline = node.first_child("complexType")
        if inline is not None:
            return self._as_element(self.parse_complex_type(inline, namespace), node, name)

        inline = node.first_child("simpleType")
        if inline is not None:
            return self._as_element(self.parse_simple_type(inline, namespace), node, name)

        type_ref = self._resolve_attr(node, "type")
        if type_ref:
            return WsdlType(
                name=name,
                kind=TypeKind.ELEMENT,
                documentation=documentation_of(node),
                namespace=namespace,
                base=type_ref,
            )
        return None

    # ------------------------------------------------------------------
    # Fields and facets
    # ------------------------------------------------------------------

    def _parse_fields(self, container: XmlNode) -> list[TypeField]:
        """Flatten a sequence/choice/all group into fields, recursing into nested groups."""
        fields: list[TypeField] = []
        for child in container.children():
            if child.local_name == "element":
                field = self._parse_field_element(child)
                if field is not None:
                    fields.append(field)
            elif child.local_name in FIELD_CONTAINERS:
                fields.extend(self._parse_fields(child))
            elif child.local_name == "any":
                min_occurs = _parse_int(child.attr("minOccurs"))
                min_occurs = 1 if min_occurs is None else min_occurs
                fields.append(
                    TypeField(
                        name=ANY_TYPE,
                        type=ANY_TYPE,
                        min_occurs=min_occurs,
                        max_occurs=_parse_max_occurs(child.attr("maxOccurs")),
                        is_optional=min_occurs == 0,
                    )
                )
        return fields

    def _parse_field_element(self, node: XmlNode) -> TypeField | None:
        raw_name = node.attr("name") or node.attr("ref")
        if not raw_name:
            return None
        name = self._ns.local_name(raw_name)

        field_type = self._resolve_attr(node, "type")
        if not field_type:
            has_inline = node.first_child("complexType") is not None or node.first_child("simpleType") is not None
            field_type = f"{INLINE_TYPE_PREFIX}{name}" if has_inline else ANY_TYPE

        min_occurs = _parse_int(node.attr("minOccurs"))
        min_occurs = 1 if min_occurs is None else min_occurs
        return TypeField(
            name=name,
            type=field_type,
            min_occurs=min_occurs,
            max_occurs=_parse_max_occurs(node.attr("maxOccurs")),
            documentation=documentation_of(node),
            is_optional=min_occurs == 0,
        )

    def _parse_attributes(self, parent: XmlNode) -> list[TypeField]:
        attributes: list[TypeField] = []
        for node in parent.children_named("attribute"):
            raw_name = node.attr("name") or node.attr("ref")
            if not raw_name:
                continue
            required = (node.attr("use") or "optional") == "required"
            attributes.append(
                TypeField(
                    name=self._ns.local_name(raw_name),
                    type=self._resolve_attr(node, "type") or "string",
                    min_occurs=1 if required else 0,
                    max_occurs=1,
                    documentation=documentation_of(node),
                    is_attribute=True,
                    is_optional=not required,
                )
            )
        return attributes

    def _parse_restriction(self, node: XmlNode, base: str) -> Restriction:
        facets: dict[str, Any] = {}
        enumeration: list[str] | None = None
        for child in node.children():
            value = child.attr("value")
            facet = child.local_name
            if facet == "enumeration":
                if enumeration is None:
                    enumeration = []
                if value:
                    enumeration.append(value)
            elif facet in _LENGTH_FACETS:
                length = _parse_int(value)
                if length is not None:
                    facets[_LENGTH_FACETS[facet]] = length
            elif facet in _STRING_FACETS and value:
                facets[_STRING_FACETS[facet]] = value
        return Restriction(base=base, enumeration=enumeration, **facets)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_attr(self, node: XmlNode, name: str) -> str | None:
        """Return the local name of a QName-valued attribute, or None if absent or empty."""
        value = node.attr(name)
        if not value:
            return None
        return self._ns.local_name(value)

    @staticmethod
    def _as_element(parsed: WsdlType, node: XmlNode, name: str) -> WsdlType:
        """Re-tag an inline type definition as the element that declares it."""
        return parsed.model_copy(
            update={
                "name": name,
                "kind": TypeKind.ELEMENT,
                "documentation": documentation_of(node) or parsed.documentation,
            }
        )


_LENGTH_FACETS: dict[str, str] = {
    "minLength": "min_length",
    "maxLength": "max_length",
}

# Kept verbatim; their meaning depends on the base type.
_STRING_FACETS: dict[str, str] = {
    "pattern": "pattern",
    "minInclusive": "min_inclusive",
    "maxInclusive": "max_inclusive",
    "minExclusive": "min_exclusive",
    "maxExclusive": "max_exclusive",
}
