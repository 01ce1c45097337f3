"""Build type catalogs from JSON Schema documents."""

import logging

from .schema_parsing import aggregate_schema_results, parse_schema

logging.getLogger("json_schema_catalog").addHandler(logging.NullHandler())

__all__ = [
    "parse_schema",
    "aggregate_schema_results",
]
