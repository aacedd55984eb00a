# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration file loader."""

from pathlib import Path

import pytest

from wsdlview.workspace.config import (
    DEFAULT_CACHE_FILE,
    DEFAULT_REQUEST_TIMEOUT,
    ViewerConfig,
    ViewerConfigError,
    load_viewer_config,
)

# ###############
# Helpers
# ###############


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / ".wsdlview.yaml"
    path.write_text(text, encoding="utf-8")
    return path


# ###############
# Tests
# ###############


def test_full_config(tmp_path: Path) -> None:
    path = _write(tmp_path, "request-timeout: 5\nverify-tls: false\ncache-file: cache/source.wsdl\n")
    config = load_viewer_config(path)
    assert config == ViewerConfig(request_timeout=5.0, verify_tls=False, cache_file="cache/source.wsdl")


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config = load_viewer_config(_write(tmp_path, ""))
    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert config.verify_tls is True
    assert config.cache_file == DEFAULT_CACHE_FILE


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ViewerConfigError, match="not found"):
        load_viewer_config(tmp_path / "absent.yaml")


def test_missing_file_allowed(tmp_path: Path) -> None:
    assert load_viewer_config(tmp_path / "absent.yaml", missing_ok=True) == ViewerConfig()


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("request-timeout: [1\n", "Invalid YAML"),
        ("- a\n- b\n", "must be a YAML mapping"),
        ("colour: blue\n", "unknown field"),
        ("request-timeout: 0\n", "positive number"),
        ("request-timeout: true\n", "positive number"),
        ("request-timeout: soon\n", "positive number"),
        ("verify-tls: maybe\n", "true or false"),
        ("cache-file: ''\n", "non-empty string"),
    ],
)
def test_invalid_config(tmp_path: Path, text: str, message: str) -> None:
    with pytest.raises(ViewerConfigError, match=message):
        load_viewer_config(_write(tmp_path, text))
