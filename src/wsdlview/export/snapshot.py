# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed-document snapshots.

Snapshots are compact JSON files holding the parsed model (not the XML), so
a document can be inspected or diffed without re-parsing. The format is
versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from wsdlview.model.entities import WsdlDocument

# ###############
# Public Interface
# ###############

SNAPSHOT_FORMAT_VERSION = "1"
SNAPSHOT_SUFFIX = ".wsdl.json"


def serialize(document: WsdlDocument, *, include_source: bool = True) -> str:
    """Serialize a WsdlDocument to a compact JSON string.

    Args:
        document: The parsed document.
        include_source: Keep the raw XML text in the snapshot.
    """
    payload = document.model_dump(mode="json", exclude_none=True)
    if not include_source:
        payload.pop("raw_xml", None)
    return json.dumps({"v": SNAPSHOT_FORMAT_VERSION, "document": payload}, separators=(",", ":"))


def deserialize(data: str) -> WsdlDocument:
    """Deserialize a WsdlDocument from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`WsdlDocument` model.

    Raises:
        ValueError: If the snapshot format version is not recognised or the
            payload does not describe a document.
    """
    obj = json.loads(data)
    version = obj.get("v") if isinstance(obj, dict) else None
    if version != SNAPSHOT_FORMAT_VERSION:
        raise ValueError(f"Unsupported snapshot format version: {version!r}")
    # pydantic's ValidationError is a ValueError subclass.
    return WsdlDocument.model_validate(obj.get("document", {}))


def write_snapshot(document: WsdlDocument, path: Path, *, include_source: bool = True) -> None:
    """Write a snapshot to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(document, include_source=include_source), encoding="utf-8")


def read_snapshot(path: Path) -> WsdlDocument:
    """Read and deserialize a snapshot from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


def snapshot_path_for(source: str) -> Path:
    """Return the default snapshot path for a file or URL source."""
    name = source.rstrip("/").rsplit("/", 1)[-1].split("?", 1)[0] or "service"
    stem = name[: -len(".wsdl")] if name.lower().endswith(".wsdl") else name
    return Path(stem + SNAPSHOT_SUFFIX)
