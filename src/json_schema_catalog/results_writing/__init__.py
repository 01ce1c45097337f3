"""Results writing domain exports."""

from .catalog_writer import (
    OUTPUT_FORMATS,
    catalog_to_mapping,
    render_schema_catalog,
    type_definition_to_mapping,
    write_schema_catalog,
)

__all__ = [
    "OUTPUT_FORMATS",
    "catalog_to_mapping",
    "render_schema_catalog",
    "type_definition_to_mapping",
    "write_schema_catalog",
]
