# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI for browsing a parsed WSDL document."""

from __future__ import annotations

import dash
from dash import dcc, html

from wsdlview.model.entities import Message, Service, WsdlDocument
from wsdlview.model.types import WsdlType
from wsdlview.views.formatting import format_field_name, format_field_suffix
from wsdlview.views.operations import OperationRecord, get_all_operations
from wsdlview.views.references import TypeReverseRef, type_reverse_refs

# ###############
# Public Interface
# ###############

APP_TITLE = "WSDL Viewer"


def create_app(document: WsdlDocument, source_label: str = "") -> dash.Dash:
    """Create and configure the viewer application for *document*."""
    app = dash.Dash(
        __name__,
        title=APP_TITLE,
    )
    app.layout = build_layout(document, source_label)
    return app


def build_layout(document: WsdlDocument, source_label: str = "") -> html.Div:
    """Build the application layout: a header and one tab per section."""
    operations = get_all_operations(document)
    type_refs = type_reverse_refs(document, operations)
    header: list = [html.H1(APP_TITLE)]
    if source_label:
        header.append(html.P(f"Source: {source_label}"))
    header.append(html.P(f"Target namespace: {document.target_namespace or '(none)'}"))
    if document.documentation:
        header.append(html.P(document.documentation, style={"color": "#666"}))

    tabs = dcc.Tabs(
        [
            dcc.Tab(label=f"Services ({len(document.services)})", children=_services_tab(document.services)),
            dcc.Tab(label=f"Operations ({len(operations)})", children=_operations_tab(operations)),
            dcc.Tab(label=f"Types ({len(document.types)})", children=_types_tab(document.types, type_refs)),
            dcc.Tab(label=f"Messages ({len(document.messages)})", children=_messages_tab(document.messages)),
        ]
    )
    return html.Div(
        [*header, html.Hr(), tabs],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


# ################
# Implementation
# ################

_CELL_STYLE = {"border": "1px solid #ddd", "padding": "0.25rem 0.5rem", "textAlign": "left"}


def _table(headers: list[str], rows: list[list[str]]) -> html.Table:
    return html.Table(
        [
            html.Thead(html.Tr([html.Th(h, style=_CELL_STYLE) for h in headers])),
            html.Tbody([html.Tr([html.Td(cell, style=_CELL_STYLE) for cell in row]) for row in rows]),
        ],
        style={"borderCollapse": "collapse", "marginBottom": "1rem"},
    )


def _empty(text: str) -> html.P:
    return html.P(text, style={"color": "#666"})


def _services_tab(services: list[Service]) -> list:
    if not services:
        return [_empty("No services declared.")]
    children: list = []
    for service in services:
        children.append(html.H3(service.name, id=f"service-{service.name}"))
        if service.documentation:
            children.append(html.P(service.documentation))
        rows = [[port.name, port.binding, port.protocol.value, port.address] for port in service.ports]
        children.append(_table(["Port", "Binding", "Protocol", "Address"], rows))
    return children


def _operations_tab(operations: list[OperationRecord]) -> list:
    if not operations:
        return [_empty("No operations declared.")]
    rows = [
        [
            op.service_name,
            op.port_name,
            op.operation_name,
            op.soap_action or "",
            op.input.message if op.input else "",
            op.output.message if op.output else "",
        ]
        for op in operations
    ]
    return [_table(["Service", "Port", "Operation", "SOAP action", "Input", "Output"], rows)]


def _types_tab(types: list[WsdlType], refs: dict[str, list[TypeReverseRef]]) -> list:
    if not types:
        return [_empty("No types declared.")]
    children: list = []
    for wsdl_type in types:
        heading = f"{wsdl_type.name} ({wsdl_type.kind.value})"
        if wsdl_type.base:
            heading += f" : {wsdl_type.base}"
        children.append(html.H3(heading, id=f"type-{wsdl_type.name}"))
        if wsdl_type.documentation:
            children.append(html.P(wsdl_type.documentation))
        if wsdl_type.fields:
            rows = [
                [format_field_name(f) + format_field_suffix(f), f.type, f.documentation] for f in wsdl_type.fields
            ]
            children.append(_table(["Field", "Type", "Documentation"], rows))
        if wsdl_type.restrictions and wsdl_type.restrictions.enumeration:
            children.append(html.P("Values: " + ", ".join(wsdl_type.restrictions.enumeration)))
        used_by = refs.get(wsdl_type.name, [])
        if used_by:
            labels = [f"{ref.kind.value} {ref.name}" + (f" ({ref.detail})" if ref.detail else "") for ref in used_by]
            children.append(html.P("Used by: " + "; ".join(labels), style={"color": "#666"}))
    return children


def _messages_tab(messages: list[Message]) -> list:
    if not messages:
        return [_empty("No messages declared.")]
    children: list = []
    for message in messages:
        children.append(html.H3(message.name, id=f"message-{message.name}"))
        rows = [[part.name, part.element or "", part.type or ""] for part in message.parts]
        children.append(_table(["Part", "Element", "Type"], rows))
    return children
