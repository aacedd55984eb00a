# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reverse reference maps: who uses a given message or type.

Forward references in the model are plain names (part -> element, field ->
type, operation -> message). These maps invert them so a viewer can answer
"where is this used?" without scanning the whole document again.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from wsdlview.model.entities import WsdlDocument
from wsdlview.model.types import ANY_TYPE
from wsdlview.views.operations import OperationRecord, get_message_by_name

# ###############
# Public Interface
# ###############


class MessageRole(str, Enum):
    """How an operation uses a message."""

    INPUT = "input"
    OUTPUT = "output"
    FAULT = "fault"


class ReferenceKind(str, Enum):
    """The kind of entity holding a reference to a type."""

    MESSAGE = "message"
    OPERATION = "operation"
    TYPE = "type"


class MessageReverseRef(BaseModel):
    """An operation that uses a message."""

    model_config = ConfigDict(frozen=True)

    operation_name: str
    role: MessageRole


class TypeReverseRef(BaseModel):
    """An entity that refers to a type or element.

    Attributes:
        kind: What holds the reference.
        name: Name of the referencing message, operation, or type.
        detail: Where the reference sits, e.g. ``"part: body"``, ``"input"``,
            ``"extends"`` or ``"field: amount"``.
        indirect: True for references reached through another entity
            (operation -> message -> type).
    """

    model_config = ConfigDict(frozen=True)

    kind: ReferenceKind
    name: str
    detail: str | None = None
    indirect: bool = False


def message_reverse_refs(records: list[OperationRecord]) -> dict[str, list[MessageReverseRef]]:
    """Map each message name to the operations using it as input or output."""
    refs: dict[str, list[MessageReverseRef]] = {}
    for record in records:
        if record.input is not None and record.input.message:
            refs.setdefault(record.input.message, []).append(
                MessageReverseRef(operation_name=record.operation_name, role=MessageRole.INPUT)
            )
        if record.output is not None and record.output.message:
            refs.setdefault(record.output.message, []).append(
                MessageReverseRef(operation_name=record.operation_name, role=MessageRole.OUTPUT)
            )
    return refs


def type_reverse_refs(
    document: WsdlDocument,
    records: list[OperationRecord],
) -> dict[str, list[TypeReverseRef]]:
    """Map each type or element name to the entities that reference it.

    Sources, in order:

    1. Message parts (``element`` and ``type``).
    2. Operations, indirectly, through the parts of their input and output
       messages (a part's ``element`` takes precedence over its ``type``).
    3. Types, through their ``base`` (``extends``) and their fields, except
       wildcard fields.

    A reference with the same (kind, name, detail) is recorded only once per
    referenced name. Each list places direct references before indirect ones
    and otherwise keeps discovery order.
    """
    collector = _RefCollector()

    for message in document.messages:
        for part in message.parts:
            detail = f"part: {part.name}"
            ref = TypeReverseRef(kind=ReferenceKind.MESSAGE, name=message.name, detail=detail)
            if part.element:
                collector.add(part.element, ref)
            if part.type:
                collector.add(part.type, ref)

    for record in records:
        for role, op_message in ((MessageRole.INPUT, record.input), (MessageRole.OUTPUT, record.output)):
            if op_message is None or not op_message.message:
                continue
            message = get_message_by_name(document, op_message.message)
            if message is None:
                continue
            for part in message.parts:
                type_name = part.element or part.type
                if type_name:
                    collector.add(
                        type_name,
                        TypeReverseRef(
                            kind=ReferenceKind.OPERATION,
                            name=record.operation_name,
                            detail=role.value,
                            indirect=True,
                        ),
                    )

    for wsdl_type in document.types:
        if wsdl_type.base:
            collector.add(
                wsdl_type.base, TypeReverseRef(kind=ReferenceKind.TYPE, name=wsdl_type.name, detail="extends")
            )
        for type_field in wsdl_type.fields:
            if type_field.type and type_field.type != ANY_TYPE:
                collector.add(
                    type_field.type,
                    TypeReverseRef(kind=ReferenceKind.TYPE, name=wsdl_type.name, detail=f"field: {type_field.name}"),
                )

    return collector.result()


# ################
# Implementation
# ################


class _RefCollector:
    """Accumulates type references, dropping duplicates."""

    def __init__(self) -> None:
        self._refs: dict[str, list[TypeReverseRef]] = {}
        self._seen: set[tuple[str, ReferenceKind, str, str | None]] = set()

    def add(self, type_name: str, ref: TypeReverseRef) -> None:
        key = (type_name, ref.kind, ref.name, ref.detail)
        if key in self._seen:
            return
        self._seen.add(key)
        self._refs.setdefault(type_name, []).append(ref)

    def result(self) -> dict[str, list[TypeReverseRef]]:
        # sorted() is stable, so discovery order survives within each group.
        return {name: sorted(refs, key=lambda r: r.indirect) for name, refs in self._refs.items()}
