"""Document-level schema version and schema id validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from json_schema_catalog.diagnostics import (
    ParserError,
    invalid_type,
    invalid_uri,
    missing_property,
    unsupported_schema_version,
)
from json_schema_catalog.type_catalog import (
    ROOT_TYPE_PATH,
    SchemaId,
    SchemaNode,
    get_type,
    normalize_uri,
)

from .constants import SCHEMA_ID_KEYS, SUPPORTED_SCHEMA_VERSIONS, VALID_URI_SCHEMES

T = TypeVar("T")


@dataclass(frozen=True)
class IdentifierCheck(Generic[T]):
    """Outcome of one identifier check: a value on success, an error otherwise."""

    value: T | None = None
    error: ParserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_schema_version(node: SchemaNode) -> IdentifierCheck[str]:
    """Return the normalized ``$schema`` value when it names a supported draft.

    Examples:
      ``{"$schema": "http://json-schema.org/draft-07/schema#"}`` succeeds with
      the same string; ``{"$schema": "http://example.org/x"}`` fails with
      ``unsupported_schema_version``; ``{}`` fails with ``missing_property``.
    """
    if not isinstance(node, Mapping) or "$schema" not in node:
        return IdentifierCheck(error=missing_property(ROOT_TYPE_PATH, "$schema"))

    raw_version = node["$schema"]
    if not isinstance(raw_version, str):
        return IdentifierCheck(
            error=invalid_type(ROOT_TYPE_PATH, "$schema", "string", get_type(raw_version))
        )

    try:
        schema_version = normalize_uri(raw_version)
    except ValueError:
        schema_version = raw_version
    if schema_version not in SUPPORTED_SCHEMA_VERSIONS:
        return IdentifierCheck(
            error=unsupported_schema_version(raw_version, SUPPORTED_SCHEMA_VERSIONS)
        )
    return IdentifierCheck(value=schema_version)


def parse_schema_id(node: SchemaNode) -> IdentifierCheck[SchemaId]:
    """Return the schema id from ``$id``, or from ``id`` when ``$id`` is absent.

    Only the first key present is considered. The value must be a URI with an
    ``http``, ``https`` or ``urn`` scheme.
    """
    id_key = None
    if isinstance(node, Mapping):
        id_key = next((key for key in SCHEMA_ID_KEYS if key in node), None)
    if id_key is None:
        return IdentifierCheck(error=missing_property(ROOT_TYPE_PATH, "id"))

    raw_id = node[id_key]
    if not isinstance(raw_id, str):
        return IdentifierCheck(
            error=invalid_type(ROOT_TYPE_PATH, id_key, "string", get_type(raw_id))
        )

    try:
        schema_id = SchemaId.parse(raw_id)
    except ValueError:
        return IdentifierCheck(error=invalid_uri(ROOT_TYPE_PATH, id_key, raw_id))
    if schema_id.scheme not in VALID_URI_SCHEMES:
        return IdentifierCheck(error=invalid_uri(ROOT_TYPE_PATH, id_key, raw_id))
    return IdentifierCheck(value=schema_id)
