# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Persistence of the last successfully parsed WSDL source."""

from pathlib import Path

# ###############
# Public Interface
# ###############


class SourceCacheError(Exception):
    """Raised when the cached source cannot be read, written, or removed."""


class SourceCache:
    """Stores one raw WSDL source text in a file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def save(self, source: str) -> None:
        """Write *source*, creating parent directories as needed.

        Raises:
            SourceCacheError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(source, encoding="utf-8")
        except OSError as exc:
            raise SourceCacheError(f"Cannot write source cache '{self.path}': {exc}") from exc

    def load(self) -> str | None:
        """Return the cached source, or None if nothing has been cached.

        Raises:
            SourceCacheError: If the file exists but cannot be read.
        """
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceCacheError(f"Cannot read source cache '{self.path}': {exc}") from exc

    def clear(self) -> None:
        """Remove the cached source if present.

        Raises:
            SourceCacheError: If the file exists but cannot be removed.
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise SourceCacheError(f"Cannot remove source cache '{self.path}': {exc}") from exc
