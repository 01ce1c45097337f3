"""Catalog build use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from json_schema_catalog.results_writing import (
    OUTPUT_FORMATS,
    render_schema_catalog,
    write_schema_catalog,
)
from json_schema_catalog.schema_loading import SchemaLoadError, load_schema_node
from json_schema_catalog.schema_parsing import aggregate_schema_results, parse_schema
from json_schema_catalog.type_catalog import SchemaNode, SchemaResult

from .build_contracts import CatalogOutcome, CatalogRequest

_LOGGER = logging.getLogger("json_schema_catalog.catalog_building")


class CatalogBuildError(Exception):
    """Raised when a catalog build cannot be completed."""


def build_schema_catalog(
    request: CatalogRequest,
    *,
    schema_loader: Callable[[Path], SchemaNode] | None = None,
) -> CatalogOutcome:
    """Parse every requested schema file and render the aggregated catalog."""
    if not request.schema_paths:
        raise CatalogBuildError("At least one schema file is required.")
    if request.output_format not in OUTPUT_FORMATS:
        raise CatalogBuildError(f"Unsupported output format: {request.output_format}")
    resolved_loader = schema_loader or load_schema_node

    result = parse_schema_files(request.schema_paths, schema_loader=resolved_loader)
    rendered = render_schema_catalog(result, request.output_format)
    output_path = None
    if request.output_path is not None:
        try:
            output_path = write_schema_catalog(result, request.output_path, request.output_format)
        except OSError as exc:
            raise CatalogBuildError(str(exc)) from exc
    _LOGGER.info(
        "Catalog built from %d files: %d schemas, %d errors, %d warnings",
        len(request.schema_paths),
        len(result.schema_dict),
        result.error_count,
        result.warning_count,
    )
    return CatalogOutcome(result=result, rendered=rendered, output_path=output_path)


def parse_schema_files(
    schema_paths: tuple[Path, ...],
    *,
    schema_loader: Callable[[Path], SchemaNode] = load_schema_node,
) -> SchemaResult:
    """Load and parse each file in order, then aggregate the per-file results."""
    per_file_results = []
    for schema_path in schema_paths:
        try:
            schema_node = schema_loader(schema_path)
        except SchemaLoadError as exc:
            raise CatalogBuildError(str(exc)) from exc
        per_file_results.append(parse_schema(schema_node, schema_path))
    return aggregate_schema_results(per_file_results)
