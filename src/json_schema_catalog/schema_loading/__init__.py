"""Schema loading exports."""

from .document_reader import SchemaLoadError, load_schema_node, parse_schema_text

__all__ = [
    "SchemaLoadError",
    "load_schema_node",
    "parse_schema_text",
]
