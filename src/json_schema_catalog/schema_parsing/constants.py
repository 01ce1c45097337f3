"""Schema parsing constants."""

SUPPORTED_SCHEMA_VERSIONS: tuple[str, ...] = (
    "http://json-schema.org/draft-04/schema#",
    "http://json-schema.org/draft-07/schema#",
)
VALID_URI_SCHEMES: tuple[str, ...] = ("http", "https", "urn")
SCHEMA_ID_KEYS: tuple[str, ...] = ("$id", "id")
DEFAULT_ROOT_NAME = "Root"
DEFINITIONS_VIEW_KEYS: tuple[str, ...] = ("$schema", "$id", "id", "title", "definitions", "$defs")
