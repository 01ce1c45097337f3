"""Schema catalog rendering and writing service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import fields
from datetime import date, time
from pathlib import Path
from typing import Any

import yaml

from json_schema_catalog.diagnostics import ParserError, ParserWarning
from json_schema_catalog.type_catalog import SchemaDefinition, SchemaResult, TypeDefinition

OUTPUT_FORMATS = ("yaml", "json")


def catalog_to_mapping(result: SchemaResult) -> dict[str, Any]:
    """Convert a schema result into plain data ready for YAML/JSON serialization."""
    return {
        "schemas": {
            schema_id: _schema_to_mapping(definition)
            for schema_id, definition in result.schema_dict.items()
        },
        "errors": _file_diagnostics_to_list(result.schema_errors),
        "warnings": _file_diagnostics_to_list(result.schema_warnings),
    }


def render_schema_catalog(result: SchemaResult, output_format: str = "yaml") -> str:
    """Render the catalog as YAML or JSON text."""
    catalog = catalog_to_mapping(result)
    if output_format == "json":
        return json.dumps(catalog, indent=2, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(catalog, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {output_format}")


def write_schema_catalog(
    result: SchemaResult, output_path: Path | str, output_format: str = "yaml"
) -> Path:
    """Write the rendered catalog and return the resolved destination path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_schema_catalog(result, output_format), encoding="utf-8")
    return destination.resolve()


def _schema_to_mapping(definition: SchemaDefinition) -> dict[str, Any]:
    return {
        "file_path": definition.file_path,
        "id": str(definition.id),
        "title": definition.title,
        "description": definition.description,
        "types": {
            type_path: type_definition_to_mapping(type_definition)
            for type_path, type_definition in definition.types.items()
        },
    }


def type_definition_to_mapping(definition: TypeDefinition) -> dict[str, Any]:
    """Return the definition's fields as plain data, tagged with its construct kind."""
    rendered: dict[str, Any] = {"kind": definition.kind}
    for field in fields(definition):
        rendered[field.name] = _to_plain(getattr(definition, field.name))
    return rendered


def _file_diagnostics_to_list(
    entries: Sequence[tuple[str, Sequence[ParserError | ParserWarning]]],
) -> list[dict[str, Any]]:
    return [
        {
            "file_path": file_path,
            "diagnostics": [_diagnostic_to_mapping(diagnostic) for diagnostic in diagnostics],
        }
        for file_path, diagnostics in entries
        if diagnostics
    ]


def _diagnostic_to_mapping(diagnostic: ParserError | ParserWarning) -> dict[str, str]:
    kind = (
        diagnostic.error_type if isinstance(diagnostic, ParserError) else diagnostic.warning_type
    )
    return {
        "identifier": diagnostic.identifier,
        "type": kind.value,
        "message": diagnostic.message,
    }


def _to_plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    # YAML schema documents load unquoted timestamps as date objects
    if isinstance(value, (date, time)):
        return value.isoformat()
    return value
