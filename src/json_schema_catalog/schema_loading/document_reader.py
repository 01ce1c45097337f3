"""Schema document loading service."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from json_schema_catalog.type_catalog import SchemaNode

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class SchemaLoadError(Exception):
    """Raised when a schema file cannot be read or decoded."""


def load_schema_node(schema_path: Path | str) -> SchemaNode:
    """Read one schema file into a parsed JSON value.

    Files ending in ``.yaml`` or ``.yml`` are decoded with YAML, everything
    else as JSON.
    """
    path = Path(schema_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"Could not read schema file {path}: {exc}") from exc
    return parse_schema_text(text, yaml_document=path.suffix.lower() in YAML_SUFFIXES, source=path)


def parse_schema_text(
    text: str, *, yaml_document: bool = False, source: Path | str = "<inline>"
) -> SchemaNode:
    """Decode schema text as JSON, or as YAML when ``yaml_document`` is set."""
    if yaml_document:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Invalid YAML schema in {source}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Invalid JSON schema in {source}: {exc}") from exc
