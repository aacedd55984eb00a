# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON snapshots of parsed WSDL documents."""

from wsdlview.export.snapshot import (
    SNAPSHOT_FORMAT_VERSION,
    SNAPSHOT_SUFFIX,
    deserialize,
    read_snapshot,
    serialize,
    snapshot_path_for,
    write_snapshot,
)

__all__ = [
    "serialize",
    "deserialize",
    "write_snapshot",
    "read_snapshot",
    "snapshot_path_for",
    "SNAPSHOT_FORMAT_VERSION",
    "SNAPSHOT_SUFFIX",
]
