"""Per-file and multi-file schema results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from json_schema_catalog.diagnostics import ParserError, ParserWarning, duplicate_schema_id

from .type_definitions import TypeDefinition
from .type_paths import SchemaId, TypePath

FileErrors = tuple[str, tuple[ParserError, ...]]
FileWarnings = tuple[str, tuple[ParserWarning, ...]]


@dataclass(frozen=True)
class SchemaDefinition:
    """Finished catalog entry for one schema file."""

    file_path: str
    id: SchemaId
    title: str
    description: str | None
    types: Mapping[TypePath, TypeDefinition]


@dataclass(frozen=True)
class SchemaResult:
    """Schema definitions and per-file diagnostics across one or more files.

    Definitions are kept in fold order. When two files declare the same
    schema id the first one wins; each later definition is left out of
    ``schema_dict`` and reported in ``schema_errors`` under its own file path.
    """

    schema_definitions: tuple[SchemaDefinition, ...] = ()
    schema_warnings: tuple[FileWarnings, ...] = ()
    file_errors: tuple[FileErrors, ...] = ()

    @property
    def schema_dict(self) -> Mapping[str, SchemaDefinition]:
        resolved: dict[str, SchemaDefinition] = {}
        for definition in self.schema_definitions:
            resolved.setdefault(str(definition.id), definition)
        return MappingProxyType(resolved)

    @property
    def schema_errors(self) -> tuple[FileErrors, ...]:
        """Return file error entries followed by rejected duplicate schema ids."""
        return self.file_errors + self.duplicate_id_errors

    @property
    def duplicate_id_errors(self) -> tuple[FileErrors, ...]:
        first_paths: dict[str, str] = {}
        rejected: list[FileErrors] = []
        for definition in self.schema_definitions:
            schema_id = str(definition.id)
            if schema_id in first_paths:
                error = duplicate_schema_id(schema_id, first_paths[schema_id])
                rejected.append((definition.file_path, (error,)))
                continue
            first_paths[schema_id] = definition.file_path
        return tuple(rejected)

    @property
    def error_count(self) -> int:
        return sum(len(errors) for _path, errors in self.schema_errors)

    @property
    def warning_count(self) -> int:
        return sum(len(warnings) for _path, warnings in self.schema_warnings)

    def merge(self, other: SchemaResult) -> SchemaResult:
        """Return a new result with ``other`` appended after this one."""
        return SchemaResult(
            schema_definitions=self.schema_definitions + other.schema_definitions,
            schema_warnings=self.schema_warnings + other.schema_warnings,
            file_errors=self.file_errors + other.file_errors,
        )
