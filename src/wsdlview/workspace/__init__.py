# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration, source caching, and the document store."""

from wsdlview.workspace.config import (
    CONFIG_FILE_NAME,
    ViewerConfig,
    ViewerConfigError,
    load_viewer_config,
)
from wsdlview.workspace.source_cache import SourceCache, SourceCacheError
from wsdlview.workspace.store import StoreState, WsdlStore, is_url

__all__ = [
    "CONFIG_FILE_NAME",
    "ViewerConfig",
    "ViewerConfigError",
    "load_viewer_config",
    "SourceCache",
    "SourceCacheError",
    "StoreState",
    "WsdlStore",
    "is_url",
]
