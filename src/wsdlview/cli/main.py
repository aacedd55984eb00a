# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the wsdlview command-line interface."""

import argparse
import sys
from pathlib import Path

from wsdlview.workspace.config import (
    CONFIG_FILE_NAME,
    ViewerConfig,
    ViewerConfigError,
    load_viewer_config,
)
from wsdlview.workspace.source_cache import SourceCache, SourceCacheError
from wsdlview.workspace.store import WsdlStore

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the wsdlview CLI."""
    parser = argparse.ArgumentParser(
        prog="wsdlview",
        description="wsdlview: inspect WSDL service descriptions",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    source_help = "WSDL file path or http(s) URL (default: the last successfully parsed source)"

    show_parser = subparsers.add_parser(
        "show",
        help="Summarize a WSDL document",
        description="Print the target namespace, services, ports, and section counts.",
    )
    show_parser.add_argument("source", nargs="?", help=source_help)

    operations_parser = subparsers.add_parser(
        "operations",
        help="List the operations exposed by each service port",
        description="List every operation with its service, port, SOAP action, and messages.",
    )
    operations_parser.add_argument("source", nargs="?", help=source_help)

    types_parser = subparsers.add_parser(
        "types",
        help="List schema types and elements",
        description="List complex types, simple types, and elements with their fields.",
    )
    types_parser.add_argument("source", nargs="?", help=source_help)

    messages_parser = subparsers.add_parser(
        "messages",
        help="List messages and their parts",
        description="List every message with its parts.",
    )
    messages_parser.add_argument("source", nargs="?", help=source_help)

    refs_parser = subparsers.add_parser(
        "refs",
        help="Show what references a type, element, or message",
        description="Show the messages, operations, and types that reference NAME.",
    )
    refs_parser.add_argument("name", help="Type, element, or message name")
    refs_parser.add_argument("source", nargs="?", help=source_help)

    export_parser = subparsers.add_parser(
        "export",
        help="Write a JSON snapshot of the parsed document",
        description="Write the parsed document model as a versioned JSON snapshot.",
    )
    export_parser.add_argument("source", nargs="?", help=source_help)
    export_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path (default: <source name>.wsdl.json in the current directory)",
    )
    export_parser.add_argument(
        "--no-source",
        action="store_true",
        help="Leave the raw XML text out of the snapshot",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive WSDL viewer",
        description="Launch a web-based UI for browsing the parsed document.",
    )
    serve_parser.add_argument("source", nargs="?", help=source_help)
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    subparsers.add_parser(
        "clear",
        help="Forget the cached last source",
        description="Remove the cached copy of the last successfully parsed source.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    handlers = {
        "show": _cmd_show,
        "operations": _cmd_operations,
        "types": _cmd_types,
        "messages": _cmd_messages,
        "refs": _cmd_refs,
        "export": _cmd_export,
        "serve": _cmd_serve,
        "clear": _cmd_clear,
    }
    handler = handlers.get(args.command)
    if handler is None:
        return 0
    return handler(args)


def _load_config(args: argparse.Namespace) -> tuple[ViewerConfig, Path] | None:
    """Load the configuration and return it with the directory relative paths resolve against."""
    try:
        if args.config is not None:
            config_path = Path(args.config).resolve()
            return load_viewer_config(config_path), config_path.parent
        cwd = Path.cwd()
        return load_viewer_config(cwd / CONFIG_FILE_NAME, missing_ok=True), cwd
    except ViewerConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _open_store(args: argparse.Namespace) -> WsdlStore | None:
    loaded = _load_config(args)
    if loaded is None:
        return None
    config, base_dir = loaded
    return WsdlStore(config=config, cache=SourceCache(base_dir / config.cache_file))


def _load_document(args: argparse.Namespace) -> WsdlStore | None:
    """Load the requested (or cached) source, reporting warnings and errors.

    Returns the store holding the document, or None after printing errors.
    """
    store = _open_store(args)
    if store is None:
        return None

    if args.source:
        store.load(args.source)
    elif not store.restore() and not store.state.errors:
        for warning in store.state.warnings:
            print(f"Warning: {warning}")
        print(
            "Error: no SOURCE given and no cached source available.",
            file=sys.stderr,
        )
        return None

    for warning in store.state.warnings:
        print(f"Warning: {warning}")
    if store.document is None:
        for error in store.state.errors:
            print(f"Error: {error}", file=sys.stderr)
        return None
    return store


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    store = _load_document(args)
    if store is None:
        return 1
    document = store.document
    assert document is not None

    print(f"Target namespace: {document.target_namespace or '(none)'}")
    if document.documentation:
        print(f"Documentation: {document.documentation}")
    print(f"Services: {len(document.services)}")
    for service in document.services:
        print(f"  {service.name}")
        for port in service.ports:
            print(f"    {port.name} [{port.protocol.value}] binding={port.binding} address={port.address or '-'}")
    print(
        f"Port types: {len(document.port_types)}, bindings: {len(document.bindings)}, "
        f"messages: {len(document.messages)}, types: {len(document.types)}, imports: {len(document.imports)}"
    )
    for imp in document.imports:
        print(f"  import {imp.namespace or '-'} from {imp.location or '-'}")
    return 0


def _cmd_operations(args: argparse.Namespace) -> int:
    """Handle the operations subcommand."""
    store = _load_document(args)
    if store is None:
        return 1

    operations = store.operations
    if not operations:
        print("No operations declared.")
        return 0
    for op in operations:
        line = f"{op.service_name}/{op.port_name}: {op.operation_name}"
        if op.soap_action:
            line += f" action={op.soap_action}"
        if op.input is not None:
            line += f" in={op.input.message}"
        if op.output is not None:
            line += f" out={op.output.message}"
        print(line)
    return 0


def _cmd_types(args: argparse.Namespace) -> int:
    """Handle the types subcommand."""
    from wsdlview.views.formatting import format_field_name, format_field_suffix

    store = _load_document(args)
    if store is None:
        return 1

    if not store.types:
        print("No types declared.")
        return 0
    for wsdl_type in store.types:
        heading = f"{wsdl_type.name} ({wsdl_type.kind.value})"
        if wsdl_type.base:
            heading += f" : {wsdl_type.base}"
        print(heading)
        for type_field in wsdl_type.fields:
            print(f"  - {format_field_name(type_field)}{format_field_suffix(type_field)}: {type_field.type}")
        restriction = wsdl_type.restrictions
        if restriction is not None and restriction.enumeration:
            print(f"  values: {', '.join(restriction.enumeration)}")
    return 0


def _cmd_messages(args: argparse.Namespace) -> int:
    """Handle the messages subcommand."""
    store = _load_document(args)
    if store is None:
        return 1

    if not store.messages:
        print("No messages declared.")
        return 0
    for message in store.messages:
        print(message.name)
        for part in message.parts:
            described = " ".join(
                f"{label}={value}" for label, value in (("element", part.element), ("type", part.type)) if value
            )
            print(f"  - {part.name}{': ' + described if described else ''}")
    return 0


def _cmd_refs(args: argparse.Namespace) -> int:
    """Handle the refs subcommand."""
    store = _load_document(args)
    if store is None:
        return 1

    type_refs = store.type_reverse_refs.get(args.name, [])
    message_refs = store.message_reverse_refs.get(args.name, [])
    if not type_refs and not message_refs:
        print(f"No references to '{args.name}'.")
        return 0

    for ref in type_refs:
        line = f"{ref.kind.value} {ref.name}"
        if ref.detail:
            line += f" ({ref.detail})"
        if ref.indirect:
            line += " [indirect]"
        print(line)
    for msg_ref in message_refs:
        print(f"operation {msg_ref.operation_name} ({msg_ref.role.value})")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    """Handle the export subcommand."""
    from wsdlview.export.snapshot import snapshot_path_for, write_snapshot

    store = _load_document(args)
    if store is None:
        return 1
    document = store.document
    assert document is not None

    output = Path(args.output) if args.output else snapshot_path_for(args.source or "service")
    try:
        write_snapshot(document, output, include_source=not args.no_source)
    except OSError as exc:
        print(f"Error: cannot write snapshot '{output}': {exc}", file=sys.stderr)
        return 1
    print(f"Snapshot written: {output}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    store = _load_document(args)
    if store is None:
        return 1
    document = store.document
    assert document is not None

    from wsdlview.webui.app import create_app

    print(f"Serving WSDL viewer at http://{args.host}:{args.port}/")
    app = create_app(document, source_label=args.source or "(cached source)")
    app.run(host=args.host, port=args.port, debug=False)
    return 0


def _cmd_clear(args: argparse.Namespace) -> int:
    """Handle the clear subcommand."""
    loaded = _load_config(args)
    if loaded is None:
        return 1
    config, base_dir = loaded
    cache = SourceCache(base_dir / config.cache_file)
    try:
        cache.clear()
    except SourceCacheError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Cached source cleared.")
    return 0
