# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flattened operation view and name lookups over a parsed document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from wsdlview.model.entities import Binding, Message, OperationMessage, WsdlDocument
from wsdlview.model.types import WsdlType

# ###############
# Public Interface
# ###############

# Service name reported for operations of documents that declare no usable service.
DEFAULT_SERVICE_NAME = "Default"


class OperationRecord(BaseModel):
    """One operation as exposed by one port of one service."""

    model_config = ConfigDict(frozen=True)

    service_name: str
    port_name: str
    operation_name: str
    soap_action: str | None = None
    documentation: str = ""
    input: OperationMessage | None = None
    output: OperationMessage | None = None


def get_all_operations(document: WsdlDocument) -> list[OperationRecord]:
    """Flatten service, port, binding and port type into one record per exposed operation.

    A port exposes the operations of port type ``P`` when its binding (looked
    up by name) declares ``type == P``. If no record can be produced this way
    but the document has port types, every operation is listed once under the
    service ``"Default"`` with the port type name as port name, so abstract
    documents without services still show their operations.
    """
    records: list[OperationRecord] = []
    bindings_by_name: dict[str, Binding] = {}
    for binding in document.bindings:
        bindings_by_name.setdefault(binding.name, binding)

    for port_type in document.port_types:
        for operation in port_type.operations:
            for service in document.services:
                for port in service.ports:
                    binding = bindings_by_name.get(port.binding)
                    if binding is None or binding.type != port_type.name:
                        continue
                    records.append(
                        OperationRecord(
                            service_name=service.name,
                            port_name=port.name,
                            operation_name=operation.name,
                            soap_action=operation.soap_action,
                            documentation=operation.documentation,
                            input=operation.input,
                            output=operation.output,
                        )
                    )

    if not records and document.port_types:
        records = [
            OperationRecord(
                service_name=DEFAULT_SERVICE_NAME,
                port_name=port_type.name,
                operation_name=operation.name,
                soap_action=operation.soap_action,
                documentation=operation.documentation,
                input=operation.input,
                output=operation.output,
            )
            for port_type in document.port_types
            for operation in port_type.operations
        ]

    return records


def get_message_by_name(document: WsdlDocument, name: str) -> Message | None:
    """Return the first message called *name*, or None."""
    return next((m for m in document.messages if m.name == name), None)


def get_type_by_name(document: WsdlDocument, name: str) -> WsdlType | None:
    """Return the first type or element called *name*, or None."""
    return next((t for t in document.types if t.name == name), None)
