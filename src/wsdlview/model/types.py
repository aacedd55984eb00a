# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""XML Schema type representations embedded in a WSDL document."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

UNBOUNDED = "unbounded"

# The type reference used for wildcards and fields without any type information.
ANY_TYPE = "any"

# Prefix of the sentinel type reference given to fields with an anonymous nested type.
INLINE_TYPE_PREFIX = "inline-"


class TypeKind(str, Enum):
    """The schema construct a type definition was read from."""

    COMPLEX_TYPE = "complexType"
    SIMPLE_TYPE = "simpleType"
    ELEMENT = "element"


class Restriction(BaseModel):
    """Facets of a simple type restriction.

    Numeric and date bounds are kept as the literal strings found in the
    schema since their interpretation depends on the base type.
    """

    model_config = ConfigDict(frozen=True)

    base: str
    enumeration: list[str] | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    min_inclusive: str | None = None
    max_inclusive: str | None = None
    min_exclusive: str | None = None
    max_exclusive: str | None = None


class TypeField(BaseModel):
    """A child element, wildcard, or attribute of a type definition."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    min_occurs: int = 1
    max_occurs: int | Literal["unbounded"] = 1
    documentation: str = ""
    is_attribute: bool = False
    is_optional: bool = False

    @property
    def is_repeated(self) -> bool:
        """Return True if the field may occur more than once."""
        return self.max_occurs == UNBOUNDED or (isinstance(self.max_occurs, int) and self.max_occurs > 1)


class WsdlType(BaseModel):
    """A named complex type, simple type, or top-level element of a schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: TypeKind
    documentation: str = ""
    namespace: str | None = None
    base: str | None = None
    fields: list[TypeField] = _Field(default_factory=list)
    restrictions: Restriction | None = None
