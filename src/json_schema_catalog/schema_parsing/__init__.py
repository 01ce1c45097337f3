"""Schema parsing exports."""

from .constants import (
    DEFAULT_ROOT_NAME,
    SCHEMA_ID_KEYS,
    SUPPORTED_SCHEMA_VERSIONS,
    VALID_URI_SCHEMES,
)
from .identifier_validation import IdentifierCheck, parse_schema_id, parse_schema_version
from .result_aggregation import aggregate_schema_results
from .root_parser import parse_schema

__all__ = [
    "SUPPORTED_SCHEMA_VERSIONS",
    "VALID_URI_SCHEMES",
    "SCHEMA_ID_KEYS",
    "DEFAULT_ROOT_NAME",
    "IdentifierCheck",
    "parse_schema_version",
    "parse_schema_id",
    "parse_schema",
    "aggregate_schema_results",
]
