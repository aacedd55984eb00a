# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for WSDL documents (services, bindings, messages, types)."""

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
    WsdlDocument,
)
from wsdlview.model.types import (
    ANY_TYPE,
    INLINE_TYPE_PREFIX,
    UNBOUNDED,
    Restriction,
    TypeField,
    TypeKind,
    WsdlType,
)

__all__ = [
    # Schema types
    "ANY_TYPE",
    "INLINE_TYPE_PREFIX",
    "UNBOUNDED",
    "TypeKind",
    "Restriction",
    "TypeField",
    "WsdlType",
    # Entities
    "Protocol",
    "Import",
    "Port",
    "Service",
    "MessagePart",
    "Message",
    "OperationMessage",
    "Operation",
    "PortType",
    "BodyDescriptor",
    "BindingHeader",
    "BindingMessage",
    "BindingOperation",
    "Binding",
    "WsdlDocument",
]
