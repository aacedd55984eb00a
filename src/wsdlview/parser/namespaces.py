# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Namespace prefix table and qualified-name resolution."""

from __future__ import annotations

from dataclasses import dataclass

from wsdlview.parser.tree import XmlNode

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class QName:
    """A resolved qualified name.

    Attributes:
        local_name: The part after the prefix (or the whole token if unprefixed).
        namespace: The URI bound to the prefix, or None if the token had no
            prefix or the prefix was never declared.
    """

    local_name: str
    namespace: str | None = None


class NamespaceTable:
    """Prefix to namespace URI bindings declared on a document root."""

    def __init__(self, bindings: dict[str, str] | None = None) -> None:
        self._bindings: dict[str, str] = dict(bindings or {})

    @classmethod
    def from_root(cls, root: XmlNode) -> NamespaceTable:
        """Capture the bindings declared on *root*; ``xmlns`` maps to the empty prefix."""
        return cls(root.declared_namespaces)

    def lookup(self, prefix: str) -> str | None:
        """Return the URI bound to *prefix*, or None."""
        return self._bindings.get(prefix)

    def resolve_qname(self, token: str) -> QName:
        """Split *token* on its first colon and resolve the prefix.

        Undeclared prefixes are tolerated: the local name is still returned,
        with no namespace.
        """
        prefix, sep, local = token.partition(":")
        if not sep:
            return QName(local_name=token)
        return QName(local_name=local, namespace=self._bindings.get(prefix))

    def local_name(self, token: str) -> str:
        """Return the local part of *token*."""
        return self.resolve_qname(token).local_name

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)
