"""Catalog build entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from json_schema_catalog.type_catalog import SchemaResult


@dataclass(frozen=True)
class CatalogRequest:
    """Input contract for building one catalog."""

    schema_paths: tuple[Path, ...]
    output_path: Path | None = None
    output_format: str = "yaml"


@dataclass(frozen=True)
class CatalogOutcome:
    """Output contract for one built catalog."""

    result: SchemaResult
    rendered: str
    output_path: Path | None

    @property
    def schema_count(self) -> int:
        return len(self.result.schema_dict)

    @property
    def error_count(self) -> int:
        return self.result.error_count

    @property
    def warning_count(self) -> int:
        return self.result.warning_count
