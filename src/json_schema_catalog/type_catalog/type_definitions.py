"""Resolved type definitions, one per recognized schema construct.

Child schemas are never embedded: composite definitions point at them by
type path, and each child owns its own entry in the type dictionary.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeAlias

from .type_paths import TypePath


@dataclass(frozen=True)
class AllOfType:
    """Intersection of the referenced member types."""

    kind: ClassVar[str] = "all_of"

    name: str
    path: TypePath
    types: tuple[TypePath, ...]
    description: str | None = None


@dataclass(frozen=True)
class AnyOfType:
    """Value matching at least one of the referenced member types."""

    kind: ClassVar[str] = "any_of"

    name: str
    path: TypePath
    types: tuple[TypePath, ...]
    description: str | None = None


@dataclass(frozen=True)
class OneOfType:
    """Value matching exactly one of the referenced member types."""

    kind: ClassVar[str] = "one_of"

    name: str
    path: TypePath
    types: tuple[TypePath, ...]
    description: str | None = None


@dataclass(frozen=True)
class ArrayType:
    """Homogeneous list; ``items`` is None when the item schema is unconstrained."""

    kind: ClassVar[str] = "array"

    name: str
    path: TypePath
    items: TypePath | None
    description: str | None = None


@dataclass(frozen=True)
class TupleType:
    """Positional list with one type per index."""

    kind: ClassVar[str] = "tuple"

    name: str
    path: TypePath
    items: tuple[TypePath, ...]
    description: str | None = None


@dataclass(frozen=True)
class ObjectType:
    """Object with named properties.

    ``additional_properties`` is a type path for a schema-valued
    ``additionalProperties``, the literal boolean when given as one, or None.
    """

    kind: ClassVar[str] = "object"

    name: str
    path: TypePath
    properties: Mapping[str, TypePath] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    pattern_properties: Mapping[str, TypePath] = field(default_factory=dict)
    additional_properties: TypePath | bool | None = None
    description: str | None = None


@dataclass(frozen=True)
class TypeReference:
    """Alias for the type addressed by a ``$ref`` target."""

    kind: ClassVar[str] = "type_reference"

    name: str
    path: TypePath
    target: str
    description: str | None = None


@dataclass(frozen=True)
class EnumType:
    kind: ClassVar[str] = "enum"

    name: str
    path: TypePath
    type: str | None
    values: tuple[Any, ...]
    description: str | None = None


@dataclass(frozen=True)
class ConstType:
    kind: ClassVar[str] = "const"

    name: str
    path: TypePath
    type: str | None
    const: Any
    description: str | None = None


@dataclass(frozen=True)
class UnionType:
    """Value of any of several primitive JSON types, e.g. ``["string", "null"]``."""

    kind: ClassVar[str] = "union"

    name: str
    path: TypePath
    types: tuple[str, ...]
    description: str | None = None


@dataclass(frozen=True)
class PrimitiveType:
    kind: ClassVar[str] = "primitive"

    name: str
    path: TypePath
    type: str
    description: str | None = None


TypeDefinition: TypeAlias = (
    AllOfType
    | AnyOfType
    | OneOfType
    | ArrayType
    | TupleType
    | ObjectType
    | TypeReference
    | EnumType
    | ConstType
    | UnionType
    | PrimitiveType
)
