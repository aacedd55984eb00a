# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the wsdlview configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".wsdlview.yaml"

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CACHE_FILE = ".wsdlview/last-source.wsdl"


class ViewerConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ViewerConfig:
    """Settings for loading and caching WSDL sources.

    Attributes:
        request_timeout: Seconds to wait for a WSDL fetched over HTTP.
        verify_tls: Whether HTTPS certificates are verified.
        cache_file: Path of the cached last source, relative to the
            configuration file's directory unless absolute.
    """

    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    verify_tls: bool = True
    cache_file: str = DEFAULT_CACHE_FILE


def load_viewer_config(path: Path, *, missing_ok: bool = False) -> ViewerConfig:
    """Load and parse a wsdlview configuration file.

    Args:
        path: Path to the ``.wsdlview.yaml`` file.
        missing_ok: Return the defaults instead of failing when *path* does
            not exist.

    Returns:
        A ViewerConfig instance populated from the file.

    Raises:
        ViewerConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        if missing_ok:
            return ViewerConfig()
        raise ViewerConfigError(f"Configuration file not found: {path}") from None
    except OSError as exc:
        raise ViewerConfigError(f"Cannot read configuration file: {exc}") from exc

    return _parse_viewer_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_viewer_config(text: str, source_label: str = "<string>") -> ViewerConfig:
    """Parse configuration YAML text into a ViewerConfig.

    An empty document yields the defaults.

    Raises:
        ViewerConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ViewerConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ViewerConfig()
    if not isinstance(data, dict):
        raise ViewerConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ViewerConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = ViewerConfig()
    if "request-timeout" in data:
        config.request_timeout = _require_positive_number(data, "request-timeout", source_label)
    if "verify-tls" in data:
        config.verify_tls = _require_bool(data, "verify-tls", source_label)
    if "cache-file" in data:
        config.cache_file = _require_string(data, "cache-file", source_label)
    return config


_KNOWN_KEYS = frozenset({"request-timeout", "verify-tls", "cache-file"})


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ViewerConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise ViewerConfigError(f"{source_label}: '{key}' must be true or false")
    return value


def _require_positive_number(mapping: dict[str, object], key: str, source_label: str) -> float:
    value = mapping[key]
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ViewerConfigError(f"{source_label}: '{key}' must be a positive number")
    return float(value)
