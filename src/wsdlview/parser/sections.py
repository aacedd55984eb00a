# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extractors for the top-level WSDL sections.

Each extractor walks the direct children of an element and matches them by
local name only, so WSDL 1.1, WSDL 2.0, SOAP and HTTP namespaces may be mixed
freely. Attribute values that are qualified names are reduced to their local
part through the document's :class:`NamespaceTable`.
"""

from __future__ import annotations

from wsdlview.model.entities import (
    Binding,
    BindingHeader,
    BindingMessage,
    BindingOperation,
    BodyDescriptor,
    Import,
    Message,
    MessagePart,
    Operation,
    OperationMessage,
    Port,
    PortType,
    Protocol,
    Service,
)
from wsdlview.parser.namespaces import NamespaceTable
from wsdlview.parser.stitching import find_binding_info
from wsdlview.parser.tree import XmlNode

# ###############
# Public Interface
# ###############

UNKNOWN_NAME = "Unknown"


def documentation_of(node: XmlNode) -> str:
    """Return the trimmed text of the first ``documentation`` child, or an empty string.

    Schema components keep their documentation inside ``annotation``; it is
    used when the element has no direct ``documentation`` child.
    """
    doc = node.first_child("documentation")
    if doc is None:
        annotation = node.first_child("annotation")
        doc = annotation.first_child("documentation") if annotation is not None else None
    if doc is None:
        return ""
    return doc.text().strip()


def protocol_from_namespace(namespace_uri: str) -> Protocol:
    """Infer the protocol tag of an address or binding marker from its namespace.

    The checks are substring matches applied in order: ``soap12``, ``soap``,
    ``http``.
    """
    if "soap12" in namespace_uri:
        return Protocol.SOAP_1_2
    if "soap" in namespace_uri:
        return Protocol.SOAP_1_1
    if "http" in namespace_uri:
        return Protocol.HTTP
    return Protocol.SOAP


def parse_imports(root: XmlNode) -> list[Import]:
    """Record every ``import`` child of the root; nothing is fetched."""
    return [
        Import(
            namespace=imp.attr("namespace") or "",
            location=imp.attr("location") or imp.attr("schemaLocation") or "",
        )
        for imp in root.children_named("import")
    ]


def parse_services(root: XmlNode, namespaces: NamespaceTable) -> list[Service]:
    """Extract every ``service`` and its ports."""
    return [
        Service(
            name=service.attr("name") or UNKNOWN_NAME,
            documentation=documentation_of(service),
            ports=[_parse_port(port, namespaces) for port in service.children_named("port")],
        )
        for service in root.children_named("service")
    ]


def parse_port_types(root: XmlNode, namespaces: NamespaceTable) -> list[PortType]:
    """Extract WSDL 1.1 ``portType`` elements followed by WSDL 2.0 ``interface`` elements."""
    elements = root.children_named("portType") + root.children_named("interface")
    return [
        PortType(
            name=element.attr("name") or UNKNOWN_NAME,
            documentation=documentation_of(element),
            operations=_parse_operations(element, root, namespaces),
        )
        for element in elements
    ]


def parse_bindings(root: XmlNode, namespaces: NamespaceTable) -> list[Binding]:
    """Extract every ``binding`` with its protocol marker and operations."""
    bindings: list[Binding] = []
    for binding in root.children_named("binding"):
        protocol = Protocol.SOAP
        style = "document"
        transport = ""
        marker = binding.first_child("binding")
        if marker is not None:
            protocol = protocol_from_namespace(marker.namespace)
            style = marker.attr("style") or "document"
            transport = marker.attr("transport") or ""

        bindings.append(
            Binding(
                name=binding.attr("name") or UNKNOWN_NAME,
                type=namespaces.local_name(binding.attr("type") or ""),
                protocol=protocol,
                style=style,
                transport=transport,
                operations=[_parse_binding_operation(op, namespaces) for op in binding.children_named("operation")],
            )
        )
    return bindings


def parse_messages(root: XmlNode, namespaces: NamespaceTable) -> list[Message]:
    """Extract every ``message`` and its parts in document order."""
    return [
        Message(
            name=message.attr("name") or UNKNOWN_NAME,
            documentation=documentation_of(message),
            parts=[_parse_part(part, namespaces) for part in message.children_named("part")],
        )
        for message in root.children_named("message")
    ]


# ################
# Implementation
# ################


def _parse_port(port: XmlNode, namespaces: NamespaceTable) -> Port:
    address = ""
    protocol = Protocol.SOAP
    address_el = port.first_child("address")
    if address_el is not None:
        address = address_el.attr("location") or ""
        protocol = protocol_from_namespace(address_el.namespace)

    return Port(
        name=port.attr("name") or UNKNOWN_NAME,
        binding=namespaces.local_name(port.attr("binding") or ""),
        address=address,
        protocol=protocol,
    )


def _parse_operations(port_type: XmlNode, root: XmlNode, namespaces: NamespaceTable) -> list[Operation]:
    port_type_name = port_type.attr("name") or ""
    operations: list[Operation] = []
    for op in port_type.children_named("operation"):
        op_name = op.attr("name") or UNKNOWN_NAME
        info = find_binding_info(root, port_type_name, op_name, namespaces)
        operations.append(
            Operation(
                name=op_name,
                documentation=documentation_of(op),
                input=_parse_operation_message(op, "input", namespaces),
                output=_parse_operation_message(op, "output", namespaces),
                faults=[
                    OperationMessage(
                        name=fault.attr("name") or "fault",
                        message=namespaces.local_name(fault.attr("message") or ""),
                    )
                    for fault in op.children_named("fault")
                ],
                soap_action=info.soap_action,
                style=info.style,
            )
        )
    return operations


def _parse_operation_message(op: XmlNode, direction: str, namespaces: NamespaceTable) -> OperationMessage | None:
    element = op.first_child(direction)
    if element is None:
        return None
    return OperationMessage(
        name=element.attr("name") or direction,
        message=namespaces.local_name(element.attr("message") or ""),
    )


def _parse_binding_operation(op: XmlNode, namespaces: NamespaceTable) -> BindingOperation:
    soap_action = ""
    style = ""
    # The SOAP marker shares its local name with the enclosing WSDL operation.
    marker = op.first_child("operation")
    if marker is not None:
        soap_action = marker.attr("soapAction") or ""
        style = marker.attr("style") or ""

    return BindingOperation(
        name=op.attr("name") or UNKNOWN_NAME,
        soap_action=soap_action,
        style=style,
        input=_parse_binding_message(op, "input", namespaces),
        output=_parse_binding_message(op, "output", namespaces),
    )


def _parse_binding_message(op: XmlNode, direction: str, namespaces: NamespaceTable) -> BindingMessage | None:
    element = op.first_child(direction)
    if element is None:
        return None

    body: BodyDescriptor | None = None
    headers: list[BindingHeader] = []
    for child in element.children():
        if child.local_name == "body":
            body = BodyDescriptor(
                use=child.attr("use") or "literal",
                namespace=child.attr("namespace") or None,
            )
        elif child.local_name == "header":
            headers.append(
                BindingHeader(
                    message=namespaces.local_name(child.attr("message") or ""),
                    part=child.attr("part") or "",
                    use=child.attr("use") or "literal",
                )
            )
    return BindingMessage(body=body, headers=headers)


def _parse_part(part: XmlNode, namespaces: NamespaceTable) -> MessagePart:
    type_attr = part.attr("type")
    element_attr = part.attr("element")
    return MessagePart(
        name=part.attr("name") or UNKNOWN_NAME,
        type=namespaces.local_name(type_attr) if type_attr else None,
        element=namespaces.local_name(element_attr) if element_attr else None,
    )
