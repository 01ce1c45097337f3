"""Builders for parser diagnostics with rendered messages."""

from __future__ import annotations

from collections.abc import Sequence

from .parser_diagnostics import ErrorType, ParserError, ParserWarning, WarningType


def missing_property(identifier: str, property_name: str) -> ParserError:
    """Return an error for a required schema property that is absent."""
    return ParserError(
        identifier=str(identifier),
        error_type=ErrorType.MISSING_PROPERTY,
        message=f"Could not find property '{property_name}' at '{identifier}'.",
    )


def invalid_type(
    identifier: str, property_name: str, expected_type: str, actual_type: str
) -> ParserError:
    """Return an error for a schema property holding a value of the wrong type."""
    return ParserError(
        identifier=str(identifier),
        error_type=ErrorType.INVALID_TYPE,
        message=(
            f"Expected value of property '{property_name}' at '{identifier}' "
            f"to be of type '{expected_type}' but found '{actual_type}'."
        ),
    )


def invalid_uri(identifier: str, property_name: str, value: str) -> ParserError:
    """Return an error for a schema property that does not hold a usable URI."""
    return ParserError(
        identifier=str(identifier),
        error_type=ErrorType.INVALID_URI,
        message=(
            f"Could not parse property '{property_name}' at '{identifier}' "
            f"into a valid URI: '{value}'."
        ),
    )


def unsupported_schema_version(value: str, supported_versions: Sequence[str]) -> ParserError:
    """Return an error for a `$schema` value outside the supported drafts."""
    supported = ", ".join(f"'{version}'" for version in supported_versions)
    return ParserError(
        identifier=str(value),
        error_type=ErrorType.UNSUPPORTED_SCHEMA_VERSION,
        message=f"Unsupported JSON schema version '{value}'. Supported versions: {supported}.",
    )


def duplicate_type_path(identifier: str) -> ParserError:
    """Return an error for a second type definition registered at the same path."""
    return ParserError(
        identifier=str(identifier),
        error_type=ErrorType.DUPLICATE_TYPE_PATH,
        message=(
            f"Type path '{identifier}' is defined more than once; "
            "keeping the first definition."
        ),
    )


def duplicate_schema_id(schema_id: str, first_file_path: str) -> ParserError:
    """Return an error for a schema id already claimed by another file."""
    return ParserError(
        identifier=str(schema_id),
        error_type=ErrorType.DUPLICATE_SCHEMA_ID,
        message=(
            f"Schema id '{schema_id}' is already defined by '{first_file_path}'; "
            "this schema was skipped."
        ),
    )


def undeclared_required_property(identifier: str, property_name: str) -> ParserWarning:
    """Return a warning for a `required` entry with no matching property."""
    return ParserWarning(
        identifier=str(identifier),
        warning_type=WarningType.UNDECLARED_REQUIRED_PROPERTY,
        message=(
            f"Required property '{property_name}' at '{identifier}' "
            "is not declared in 'properties'."
        ),
    )
