"""Catalog building domain exports."""

from .build_contracts import CatalogOutcome, CatalogRequest
from .catalog_build_use_case import CatalogBuildError, build_schema_catalog, parse_schema_files

__all__ = [
    "CatalogRequest",
    "CatalogOutcome",
    "CatalogBuildError",
    "build_schema_catalog",
    "parse_schema_files",
]
