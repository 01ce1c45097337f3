"""Diagnostics exports."""

from .diagnostic_factory import (
    duplicate_schema_id,
    duplicate_type_path,
    invalid_type,
    invalid_uri,
    missing_property,
    undeclared_required_property,
    unsupported_schema_version,
)
from .parser_diagnostics import ErrorType, ParserError, ParserWarning, WarningType

__all__ = [
    "ErrorType",
    "WarningType",
    "ParserError",
    "ParserWarning",
    "missing_property",
    "invalid_type",
    "invalid_uri",
    "unsupported_schema_version",
    "duplicate_type_path",
    "duplicate_schema_id",
    "undeclared_required_property",
]
