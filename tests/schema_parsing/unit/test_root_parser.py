"""Per-file schema parsing tests."""

from __future__ import annotations

import pytest
from json_schema_catalog.diagnostics import ErrorType
from json_schema_catalog.schema_parsing import parse_schema
from json_schema_catalog.type_catalog import ObjectType, PrimitiveType, SchemaId

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


def test_end_to_end_schema_with_root_object_and_definitions() -> None:
    node = {
        "$schema": DRAFT_07,
        "id": "http://ex.example/s",
        "title": "T",
        "type": "object",
        "properties": {"x": {"type": "string"}},
        "definitions": {"Foo": {"type": "string"}},
    }

    result = parse_schema(node, "schema.json")

    assert list(result.schema_dict) == ["http://ex.example/s"]
    definition = result.schema_dict["http://ex.example/s"]
    assert definition.file_path == "schema.json"
    assert definition.id == SchemaId.parse("http://ex.example/s")
    assert definition.title == "T"
    assert definition.description is None
    assert isinstance(definition.types["#"], ObjectType)
    assert definition.types["#"].name == "T"
    assert definition.types["#/definitions/Foo"] == PrimitiveType(
        name="Foo", path="#/definitions/Foo", type="string"
    )
    assert result.schema_errors == (("schema.json", ()),)
    assert result.schema_warnings == (("schema.json", ()),)


def test_definitions_are_not_parsed_as_part_of_root_object() -> None:
    node = {
        "$schema": DRAFT_07,
        "$id": "http://ex.example/s",
        "type": "object",
        "definitions": {"Foo": {"type": "string"}},
    }

    types = parse_schema(node, "schema.json").schema_dict["http://ex.example/s"].types

    assert set(types) == {"#", "#/definitions/Foo"}
    assert dict(types["#"].properties) == {}


def test_root_name_defaults_when_title_is_missing() -> None:
    node = {"$schema": DRAFT_07, "$id": "http://ex.example/s", "type": "object"}

    definition = parse_schema(node, "schema.json").schema_dict["http://ex.example/s"]

    assert definition.title == "Root"
    assert definition.types["#"].name == "Root"


def test_description_is_carried_to_schema_definition() -> None:
    node = {
        "$schema": DRAFT_07,
        "$id": "http://ex.example/s",
        "description": "Example schema.",
    }

    definition = parse_schema(node, "schema.json").schema_dict["http://ex.example/s"]

    assert definition.description == "Example schema."
    assert dict(definition.types) == {}


def test_unsupported_version_rejects_the_whole_file() -> None:
    node = {
        "$schema": "http://example.org/x",
        "id": "http://ex.example/s",
        "type": "object",
        "definitions": {"Foo": {"type": "string"}},
    }

    result = parse_schema(node, "bad.json")

    assert result.schema_dict == {}
    assert len(result.schema_errors) == 1
    file_path, errors = result.schema_errors[0]
    assert file_path == "bad.json"
    assert [error.error_type for error in errors] == [ErrorType.UNSUPPORTED_SCHEMA_VERSION]
    assert result.schema_warnings == (("bad.json", ()),)


def test_invalid_id_rejects_the_whole_file() -> None:
    result = parse_schema({"$schema": DRAFT_07, "id": "foo bar baz"}, "bad-id.json")

    assert result.schema_dict == {}
    assert [error.error_type for error in result.schema_errors[0][1]] == [ErrorType.INVALID_URI]


def test_non_mapping_document_is_rejected_without_raising() -> None:
    result = parse_schema(["not", "a", "schema"], "list.json")

    assert result.schema_dict == {}
    assert result.schema_errors[0][1][0].error_type == ErrorType.MISSING_PROPERTY


def test_nested_errors_are_collected_next_to_parsed_types() -> None:
    node = {
        "$schema": DRAFT_07,
        "$id": "http://ex.example/s",
        "type": "object",
        "properties": {"good": {"type": "string"}, "bad": 42},
        "required": ["good", "missing"],
        "definitions": {"Broken": [], "Fine": {"type": "integer"}},
    }

    result = parse_schema(node, "partial.json")

    types = result.schema_dict["http://ex.example/s"].types
    assert {"#", "#/properties/good", "#/definitions/Fine"} <= set(types)
    file_path, errors = result.schema_errors[0]
    assert file_path == "partial.json"
    assert [error.identifier for error in errors] == [
        "#/properties/bad",
        "#/definitions/Broken",
    ]
    assert len(result.schema_warnings[0][1]) == 1


def test_root_value_construct_is_not_classified() -> None:
    node = {"$schema": DRAFT_07, "$id": "http://ex.example/s", "type": "string"}

    definition = parse_schema(node, "schema.json").schema_dict["http://ex.example/s"]

    assert dict(definition.types) == {}


def test_defs_container_is_resolved_like_definitions() -> None:
    node = {
        "$schema": DRAFT_07,
        "$id": "http://ex.example/s",
        "$ref": "#/$defs/Item",
        "$defs": {"Item": {"type": "object"}},
    }

    types = parse_schema(node, "schema.json").schema_dict["http://ex.example/s"].types

    assert types["#"].target == "#/$defs/Item"
    assert types["#/$defs/Item"].name == "Item"


def test_schema_definition_types_are_read_only() -> None:
    node = {"$schema": DRAFT_07, "$id": "http://ex.example/s", "type": "object"}

    types = parse_schema(node, "schema.json").schema_dict["http://ex.example/s"].types

    with pytest.raises(TypeError):
        types["#/x"] = None  # type: ignore[index]
