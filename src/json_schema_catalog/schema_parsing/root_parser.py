"""Per-file schema parsing service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from os import PathLike
from typing import Any

from json_schema_catalog.construct_parsing import (
    DEFINITIONS_KEYS,
    NESTED_CLASSIFIER,
    ROOT_CLASSIFIER,
    DefinitionsParser,
)
from json_schema_catalog.diagnostics import ParserError
from json_schema_catalog.type_catalog import (
    EMPTY_PARSER_RESULT,
    ROOT_TYPE_PATH,
    ParserResult,
    SchemaDefinition,
    SchemaId,
    SchemaNode,
    SchemaResult,
    string_value,
)

from .constants import DEFAULT_ROOT_NAME, DEFINITIONS_VIEW_KEYS
from .identifier_validation import parse_schema_id, parse_schema_version

_LOGGER = logging.getLogger("json_schema_catalog.schema_parsing")

_DEFINITIONS_PARSER = DefinitionsParser(NESTED_CLASSIFIER.classify)


def parse_schema(root_node: SchemaNode, schema_file_path: str | PathLike[str]) -> SchemaResult:
    """Parse one schema document into a single-file schema result.

    A missing or unsupported ``$schema`` or an invalid schema id rejects the
    whole file: the result holds no schema and exactly one error. Anything
    reported while resolving types is kept next to the types that did parse.
    """
    file_path = str(schema_file_path)
    _LOGGER.debug("Parsing schema file %s", file_path)

    version_check = parse_schema_version(root_node)
    if version_check.error is not None:
        return _rejected_file(file_path, version_check.error)
    id_check = parse_schema_id(root_node)
    if id_check.error is not None:
        return _rejected_file(file_path, id_check.error)
    schema_id = id_check.value
    assert schema_id is not None

    title = string_value(root_node, "title") or DEFAULT_ROOT_NAME
    description = string_value(root_node, "description")

    root_view = {key: value for key, value in root_node.items() if key not in DEFINITIONS_KEYS}
    definitions_view = {
        key: value for key, value in root_node.items() if key in DEFINITIONS_VIEW_KEYS
    }

    root_result = ROOT_CLASSIFIER.classify(root_view, schema_id, ROOT_TYPE_PATH, title)
    definitions_result = _parse_definitions(definitions_view, schema_id)
    merged = root_result.merge(definitions_result)

    schema_definition = SchemaDefinition(
        file_path=file_path,
        id=schema_id,
        title=title,
        description=description,
        types=merged.type_dict,
    )
    _LOGGER.info(
        "Parsed %s (%s): %d types, %d errors, %d warnings",
        file_path,
        schema_id,
        len(schema_definition.types),
        len(merged.errors),
        len(merged.warnings),
    )
    return SchemaResult(
        schema_definitions=(schema_definition,),
        schema_warnings=((file_path, merged.warnings),),
        file_errors=((file_path, merged.errors),),
    )


def _parse_definitions(definitions_view: Mapping[str, Any], schema_id: SchemaId) -> ParserResult:
    if not _DEFINITIONS_PARSER.recognizes(definitions_view):
        return EMPTY_PARSER_RESULT
    return _DEFINITIONS_PARSER.parse(definitions_view, schema_id, ROOT_TYPE_PATH, "")


def _rejected_file(file_path: str, error: ParserError) -> SchemaResult:
    _LOGGER.info("Rejected schema file %s: %s", file_path, error.message)
    return SchemaResult(
        schema_warnings=((file_path, ()),),
        file_errors=((file_path, (error,)),),
    )
