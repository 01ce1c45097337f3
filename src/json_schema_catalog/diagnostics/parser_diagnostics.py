"""Parser diagnostic entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorType(str, Enum):
    """Supported parser error kinds."""

    MISSING_PROPERTY = "missing_property"
    INVALID_TYPE = "invalid_type"
    INVALID_URI = "invalid_uri"
    UNSUPPORTED_SCHEMA_VERSION = "unsupported_schema_version"
    DUPLICATE_TYPE_PATH = "duplicate_type_path"
    DUPLICATE_SCHEMA_ID = "duplicate_schema_id"


class WarningType(str, Enum):
    """Supported parser warning kinds."""

    UNDECLARED_REQUIRED_PROPERTY = "undeclared_required_property"


@dataclass(frozen=True)
class ParserError:
    """Error raised while parsing one schema node, located by its identifier."""

    identifier: str
    error_type: ErrorType
    message: str


@dataclass(frozen=True)
class ParserWarning:
    """Non-fatal finding reported while parsing one schema node."""

    identifier: str
    warning_type: WarningType
    message: str
