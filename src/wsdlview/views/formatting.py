# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text rendering of type fields for the CLI and viewer."""

from wsdlview.model.types import TypeField


def format_field_name(field: TypeField) -> str:
    """Return the field name, prefixed with ``@`` for attributes."""
    return f"@{field.name}" if field.is_attribute else field.name


def format_field_suffix(field: TypeField) -> str:
    """Return `` (optional)`` and/or ``[]`` markers for optional and repeated fields."""
    suffix = ""
    if field.is_optional:
        suffix += " (optional)"
    if field.is_repeated:
        suffix += "[]"
    return suffix
