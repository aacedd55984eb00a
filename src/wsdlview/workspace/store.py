# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""State holder around the parser.

:class:`WsdlStore` keeps the result of the last parse and exposes the views
derived from it. Fetching over HTTP, reading files, and caching the last
source happen here, around the parser; every fault is converted into the same
``errors``/``warnings`` string lists the parser itself produces.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass, field, replace
from pathlib import Path

import requests

from wsdlview.model.entities import Message, Service, WsdlDocument
from wsdlview.model.types import WsdlType
from wsdlview.parser.parser import ParseResult, parse
from wsdlview.views.operations import (
    OperationRecord,
    get_all_operations,
    get_message_by_name,
    get_type_by_name,
)
from wsdlview.views.references import (
    MessageReverseRef,
    TypeReverseRef,
    message_reverse_refs,
    type_reverse_refs,
)
from wsdlview.workspace.config import ViewerConfig
from wsdlview.workspace.source_cache import SourceCache, SourceCacheError

# ###############
# Public Interface
# ###############

URL_SCHEMES: tuple[str, ...] = ("http://", "https://")


@dataclass
class StoreState:
    """Snapshot of the store after the last load.

    Attributes:
        is_loading: True while a load is in progress.
        has_document: True if the last load produced a document.
        document: The parsed document, if any.
        errors: Errors of the last load.
        warnings: Warnings of the last load.
        raw_xml: The source text of the last load ("" if none was obtained).
    """

    is_loading: bool = False
    has_document: bool = False
    document: WsdlDocument | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    raw_xml: str = ""


def is_url(source: str) -> bool:
    """Return True if *source* names an HTTP(S) resource rather than a file."""
    return source.lower().startswith(URL_SCHEMES)


class WsdlStore:
    """Holds the last parse result and the views derived from it."""

    def __init__(
        self,
        config: ViewerConfig | None = None,
        cache: SourceCache | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config or ViewerConfig()
        self._cache = cache
        self._session = session or requests.Session()
        self.state = StoreState()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def parse_text(self, xml_text: str) -> ParseResult:
        """Parse *xml_text* and make it the current document.

        A successfully parsed source is written to the source cache, if one
        is configured; a cache failure is reported as a warning.
        """
        self._begin()
        result = parse(xml_text)

        if result.success and self._cache is not None:
            try:
                self._cache.save(xml_text)
            except SourceCacheError as exc:
                result = replace(result, warnings=[*result.warnings, str(exc)])

        self.state = StoreState(
            has_document=result.success,
            document=result.document,
            errors=list(result.errors),
            warnings=list(result.warnings),
            raw_xml=xml_text,
        )
        return result

    def load_from_url(self, url: str) -> ParseResult:
        """Fetch a WSDL document over HTTP(S) and parse it.

        Non-success HTTP statuses and transport failures are reported as a
        single error without invoking the parser.
        """
        self._begin()
        try:
            response = self._session.get(
                url,
                timeout=self._config.request_timeout,
                verify=self._config.verify_tls,
            )
        except requests.RequestException as exc:
            return self._fail(f"Network error: {exc}")

        if not response.ok:
            return self._fail(f"Failed to fetch WSDL: {response.status_code} {response.reason}")

        return self.parse_text(_response_text(response))

    def load_from_file(self, path: Path | str) -> ParseResult:
        """Read a WSDL document from disk and parse it.

        The text is decoded by its byte order mark, else by the encoding named
        in its XML declaration, else as UTF-8.
        """
        self._begin()
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            return self._fail(f"Error reading file: {exc}")
        try:
            text = _decode_source(data)
        except (UnicodeDecodeError, LookupError) as exc:
            return self._fail(f"Failed to read file as text: {exc}")
        return self.parse_text(text)

    def load(self, source: str) -> ParseResult:
        """Load *source* as a URL if it has an HTTP(S) scheme, otherwise as a file path."""
        if is_url(source):
            return self.load_from_url(source)
        return self.load_from_file(source)

    def restore(self) -> bool:
        """Re-parse the cached source; return True if it produced a document."""
        if self._cache is None:
            return False
        try:
            cached = self._cache.load()
        except SourceCacheError as exc:
            self.state = StoreState(warnings=[str(exc)])
            return False
        if not cached:
            return False
        return self.parse_text(cached).success

    def clear(self) -> None:
        """Drop the current document and remove the cached source."""
        warnings: list[str] = []
        if self._cache is not None:
            try:
                self._cache.clear()
            except SourceCacheError as exc:
                warnings.append(str(exc))
        self.state = StoreState(warnings=warnings)

    def reset(self) -> None:
        """Return to the initial state; same as :meth:`clear`."""
        self.clear()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def document(self) -> WsdlDocument | None:
        return self.state.document

    @property
    def services(self) -> list[Service]:
        return self.document.services if self.document is not None else []

    @property
    def operations(self) -> list[OperationRecord]:
        return get_all_operations(self.document) if self.document is not None else []

    @property
    def types(self) -> list[WsdlType]:
        return self.document.types if self.document is not None else []

    @property
    def messages(self) -> list[Message]:
        return self.document.messages if self.document is not None else []

    @property
    def target_namespace(self) -> str:
        return self.document.target_namespace if self.document is not None else ""

    @property
    def raw_xml(self) -> str:
        return self.state.raw_xml

    @property
    def message_reverse_refs(self) -> dict[str, list[MessageReverseRef]]:
        return message_reverse_refs(self.operations)

    @property
    def type_reverse_refs(self) -> dict[str, list[TypeReverseRef]]:
        if self.document is None:
            return {}
        return type_reverse_refs(self.document, self.operations)

    def get_message_by_name(self, name: str) -> Message | None:
        return get_message_by_name(self.document, name) if self.document is not None else None

    def get_type_by_name(self, name: str) -> WsdlType | None:
        return get_type_by_name(self.document, name) if self.document is not None else None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _begin(self) -> None:
        self.state = replace(self.state, is_loading=True, errors=[], warnings=[])

    def _fail(self, message: str) -> ParseResult:
        self.state = StoreState(errors=[message])
        return ParseResult(success=False, errors=[message])


# ################
# Implementation
# ################


_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

_XML_DECLARED_ENCODING = re.compile(rb'^\s*<\?xml[^>]*?encoding=["\']([A-Za-z0-9._-]+)["\']')


def _decode_source(data: bytes) -> str:
    """Decode raw file bytes into XML text."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data.decode(encoding)
    match = _XML_DECLARED_ENCODING.match(data)
    encoding = match.group(1).decode("ascii") if match else "utf-8"
    return data.decode(encoding)


def _response_text(response: requests.Response) -> str:
    """Decode a response body, assuming UTF-8 unless the server declares a charset."""
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        response.encoding = "utf-8"
    return response.text
