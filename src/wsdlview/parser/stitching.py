# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Links abstract operations to the SOAP details of their bindings.

A port type operation carries no SOAP action or style of its own. Those live
on the ``operation`` marker inside the matching binding operation, reached by
following: port type name -> binding ``type`` -> binding operation name.
"""

from __future__ import annotations

from dataclasses import dataclass

from wsdlview.parser.namespaces import NamespaceTable
from wsdlview.parser.tree import XmlNode

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class BindingInfo:
    """SOAP details found for an operation; both are None when no binding matches."""

    soap_action: str | None = None
    style: str | None = None


def find_binding_info(
    root: XmlNode,
    port_type_name: str,
    operation_name: str,
    namespaces: NamespaceTable,
) -> BindingInfo:
    """Find the SOAP action and style bound to an abstract operation.

    Bindings are scanned in document order; the first binding implementing
    *port_type_name* whose operation *operation_name* has an ``operation``
    marker wins. A missing match is not an error.

    Args:
        root: The document root element.
        port_type_name: Local name of the port type owning the operation.
        operation_name: Name of the operation.
        namespaces: The document's prefix table, used to resolve the binding
            ``type`` attribute.

    Returns:
        The :class:`BindingInfo`; empty attributes are reported as None.
    """
    for binding in root.children_named("binding"):
        if namespaces.local_name(binding.attr("type") or "") != port_type_name:
            continue
        for op in binding.children_named("operation"):
            if op.attr("name") != operation_name:
                continue
            marker = op.first_child("operation")
            if marker is not None:
                return BindingInfo(
                    soap_action=marker.attr("soapAction") or None,
                    style=marker.attr("style") or None,
                )
    return BindingInfo()
