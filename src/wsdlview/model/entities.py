# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Service description entities of the wsdlview model.

Entities never hold references to one another. Every cross-reference
(port -> binding, binding -> port type, operation -> message) is a plain
local name resolved on demand.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from wsdlview.model.types import WsdlType

# ###############
# Public Interface
# ###############


class Protocol(str, Enum):
    """Protocol tag inferred from the namespace of an address or binding marker."""

    SOAP = "SOAP"
    SOAP_1_1 = "SOAP 1.1"
    SOAP_1_2 = "SOAP 1.2"
    HTTP = "HTTP"


class Import(BaseModel):
    """An import or include recorded from the document (never fetched)."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    location: str = ""


class Port(BaseModel):
    """A deployed endpoint of a service."""

    model_config = ConfigDict(frozen=True)

    name: str
    binding: str
    address: str = ""
    protocol: Protocol = Protocol.SOAP


class Service(BaseModel):
    """A named group of ports."""

    model_config = ConfigDict(frozen=True)

    name: str
    documentation: str = ""
    ports: list[Port] = _Field(default_factory=list)


class MessagePart(BaseModel):
    """A part of a message, typed by a schema type and/or an element."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    element: str | None = None


class Message(BaseModel):
    """An abstract message made of ordered parts."""

    model_config = ConfigDict(frozen=True)

    name: str
    documentation: str = ""
    parts: list[MessagePart] = _Field(default_factory=list)


class OperationMessage(BaseModel):
    """The input, output, or fault of an abstract operation.

    ``parts`` is always empty here; look the message up by name to get them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    message: str
    parts: list[MessagePart] = _Field(default_factory=list)


class Operation(BaseModel):
    """An abstract operation of a port type, enriched with its SOAP binding details."""

    model_config = ConfigDict(frozen=True)

    name: str
    documentation: str = ""
    input: OperationMessage | None = None
    output: OperationMessage | None = None
    faults: list[OperationMessage] = _Field(default_factory=list)
    soap_action: str | None = None
    style: str | None = None


class PortType(BaseModel):
    """A WSDL 1.1 port type or WSDL 2.0 interface."""

    model_config = ConfigDict(frozen=True)

    name: str
    documentation: str = ""
    operations: list[Operation] = _Field(default_factory=list)


class BodyDescriptor(BaseModel):
    """The ``body`` element of a binding input or output."""

    model_config = ConfigDict(frozen=True)

    use: str = "literal"
    namespace: str | None = None


class BindingHeader(BaseModel):
    """A ``header`` element of a binding input or output."""

    model_config = ConfigDict(frozen=True)

    message: str
    part: str = ""
    use: str = "literal"


class BindingMessage(BaseModel):
    """The concrete encoding of an operation input or output."""

    model_config = ConfigDict(frozen=True)

    body: BodyDescriptor | None = None
    headers: list[BindingHeader] = _Field(default_factory=list)


class BindingOperation(BaseModel):
    """An operation of a binding."""

    model_config = ConfigDict(frozen=True)

    name: str
    soap_action: str = ""
    style: str = ""
    input: BindingMessage | None = None
    output: BindingMessage | None = None


class Binding(BaseModel):
    """A concrete protocol mapping for the operations of a port type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    protocol: Protocol = Protocol.SOAP
    style: str = "document"
    transport: str = ""
    operations: list[BindingOperation] = _Field(default_factory=list)


class WsdlDocument(BaseModel):
    """Top-level model of a parsed WSDL document."""

    model_config = ConfigDict(frozen=True)

    target_namespace: str = ""
    services: list[Service] = _Field(default_factory=list)
    port_types: list[PortType] = _Field(default_factory=list)
    bindings: list[Binding] = _Field(default_factory=list)
    messages: list[Message] = _Field(default_factory=list)
    types: list[WsdlType] = _Field(default_factory=list)
    imports: list[Import] = _Field(default_factory=list)
    documentation: str = ""
    raw_xml: str = ""
