"""Parser result accumulation.

A ``ParserResult`` keeps every type entry and diagnostic in the order it was
produced, so ``merge`` is plain concatenation: associative, with the empty
result as identity. The type-path collision policy is applied when the type
dictionary is read: the first entry for a path wins and every later entry for
the same path is reported as a ``duplicate_type_path`` error.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from json_schema_catalog.diagnostics import ParserError, ParserWarning, duplicate_type_path

from .type_definitions import TypeDefinition
from .type_paths import TypePath

TypeEntry = tuple[TypePath, TypeDefinition]


@dataclass(frozen=True)
class ParserResult:
    """Partial type dictionary plus the diagnostics gathered while building it."""

    type_entries: tuple[TypeEntry, ...] = ()
    parse_errors: tuple[ParserError, ...] = ()
    warnings: tuple[ParserWarning, ...] = ()

    @classmethod
    def from_type(cls, definition: TypeDefinition, *aliases: str) -> ParserResult:
        """Return a result holding ``definition`` at its path and any alias keys."""
        keys = (definition.path, *aliases)
        return cls(type_entries=tuple((key, definition) for key in keys))

    @classmethod
    def from_errors(cls, *errors: ParserError) -> ParserResult:
        return cls(parse_errors=tuple(errors))

    @property
    def type_dict(self) -> Mapping[TypePath, TypeDefinition]:
        """Return the read-only type dictionary, first definition per path."""
        resolved: dict[TypePath, TypeDefinition] = {}
        for path, definition in self.type_entries:
            resolved.setdefault(path, definition)
        return MappingProxyType(resolved)

    @property
    def errors(self) -> tuple[ParserError, ...]:
        """Return recorded errors followed by one error per rejected duplicate path."""
        return self.parse_errors + self.collision_errors

    @property
    def collision_errors(self) -> tuple[ParserError, ...]:
        seen: set[TypePath] = set()
        collisions: list[ParserError] = []
        for path, _definition in self.type_entries:
            if path in seen:
                collisions.append(duplicate_type_path(path))
            seen.add(path)
        return tuple(collisions)

    def merge(self, other: ParserResult) -> ParserResult:
        """Return a new result with ``other`` appended after this one."""
        return ParserResult(
            type_entries=self.type_entries + other.type_entries,
            parse_errors=self.parse_errors + other.parse_errors,
            warnings=self.warnings + other.warnings,
        )


EMPTY_PARSER_RESULT = ParserResult()


def merge_all(results: Iterable[ParserResult]) -> ParserResult:
    """Fold ``results`` left to right into a single result."""
    collected = list(results)
    return ParserResult(
        type_entries=tuple(entry for result in collected for entry in result.type_entries),
        parse_errors=tuple(error for result in collected for error in result.parse_errors),
        warnings=tuple(warning for result in collected for warning in result.warnings),
    )
