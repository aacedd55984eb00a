# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only views derived from a parsed WSDL document."""

from wsdlview.views.formatting import format_field_name, format_field_suffix
from wsdlview.views.operations import (
    DEFAULT_SERVICE_NAME,
    OperationRecord,
    get_all_operations,
    get_message_by_name,
    get_type_by_name,
)
from wsdlview.views.references import (
    MessageReverseRef,
    MessageRole,
    ReferenceKind,
    TypeReverseRef,
    message_reverse_refs,
    type_reverse_refs,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "OperationRecord",
    "get_all_operations",
    "get_message_by_name",
    "get_type_by_name",
    "MessageRole",
    "ReferenceKind",
    "MessageReverseRef",
    "TypeReverseRef",
    "message_reverse_refs",
    "type_reverse_refs",
    "format_field_name",
    "format_field_suffix",
]
