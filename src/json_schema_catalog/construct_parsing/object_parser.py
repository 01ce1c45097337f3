"""Object construct parser."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_schema_catalog.diagnostics import (
    ParserError,
    ParserWarning,
    invalid_type,
    undeclared_required_property,
)
from json_schema_catalog.type_catalog import (
    ObjectType,
    ParserResult,
    SchemaId,
    TypePath,
    add_child,
    get_type,
    merge_all,
    string_value,
)

from .construct_contract import ConstructParser, register_type


class ObjectParser(ConstructParser):
    """Objects with ``properties``, ``patternProperties`` and ``additionalProperties``.

    Malformed keywords are reported and skipped; every well-formed property
    is still parsed so the object keeps whatever could be resolved.
    """

    construct_name = "object"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return node.get("type") == "object"

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        errors: list[ParserError] = []
        warnings: list[ParserWarning] = []
        child_results: list[ParserResult] = []

        properties = self._parse_named_children(
            node, "properties", schema_id, type_path, errors, child_results
        )
        pattern_properties = self._parse_named_children(
            node, "patternProperties", schema_id, type_path, errors, child_results
        )
        required = _parse_required(node, type_path, errors)
        if isinstance(node.get("properties", {}), Mapping):
            warnings.extend(
                undeclared_required_property(type_path, property_name)
                for property_name in required
                if property_name not in properties
            )

        additional_properties: TypePath | bool | None = None
        additional = node.get("additionalProperties")
        if isinstance(additional, bool):
            additional_properties = additional
        elif isinstance(additional, Mapping):
            additional_properties = add_child(type_path, "additionalProperties")
            child_results.append(
                self.parse_child(
                    additional,
                    schema_id,
                    additional_properties,
                    default_name="additionalProperties",
                    property_name="additionalProperties",
                )
            )
        elif additional is not None:
            errors.append(
                invalid_type(
                    type_path, "additionalProperties", "object or boolean", get_type(additional)
                )
            )

        definition = ObjectType(
            name=name,
            path=type_path,
            properties=properties,
            required=required,
            pattern_properties=pattern_properties,
            additional_properties=additional_properties,
            description=string_value(node, "description"),
        )
        own_result = ParserResult(
            parse_errors=tuple(errors),
            warnings=tuple(warnings),
        )
        return merge_all([register_type(definition, node), own_result, *child_results])

    def _parse_named_children(
        self,
        node: Mapping[str, Any],
        keyword: str,
        schema_id: SchemaId,
        type_path: TypePath,
        errors: list[ParserError],
        child_results: list[ParserResult],
    ) -> dict[str, TypePath]:
        children = node.get(keyword, {})
        if not isinstance(children, Mapping):
            errors.append(invalid_type(type_path, keyword, "object", get_type(children)))
            return {}

        child_paths: dict[str, TypePath] = {}
        for child_name, child in children.items():
            child_path = add_child(type_path, keyword, child_name)
            child_paths[child_name] = child_path
            child_results.append(
                self.parse_child(
                    child,
                    schema_id,
                    child_path,
                    default_name=child_name,
                    property_name=child_name,
                )
            )
        return child_paths


def _parse_required(
    node: Mapping[str, Any], type_path: TypePath, errors: list[ParserError]
) -> tuple[str, ...]:
    value = node.get("required")
    if value is None:
        return ()
    if not isinstance(value, list):
        errors.append(invalid_type(type_path, "required", "array", get_type(value)))
        return ()
    if not all(isinstance(item, str) for item in value):
        errors.append(invalid_type(type_path, "required", "array of strings", "array"))
        return ()
    return tuple(value)
