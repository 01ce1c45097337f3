"""Array and tuple construct parsers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_schema_catalog.diagnostics import invalid_type
from json_schema_catalog.type_catalog import (
    ArrayType,
    ParserResult,
    SchemaId,
    TupleType,
    TypePath,
    add_child,
    get_type,
    merge_all,
    string_value,
)

from .construct_contract import ConstructParser, register_type


class ArrayParser(ConstructParser):
    """Homogeneous arrays: ``items`` is a single schema, a boolean, or absent."""

    construct_name = "array"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return node.get("type") == "array" and not isinstance(node.get("items"), list)

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        items = node.get("items")
        description = string_value(node, "description")

        if items is None or isinstance(items, bool):
            definition = ArrayType(name=name, path=type_path, items=None, description=description)
            return register_type(definition, node)

        if not isinstance(items, Mapping):
            error = invalid_type(type_path, "items", "object", get_type(items))
            definition = ArrayType(name=name, path=type_path, items=None, description=description)
            return register_type(definition, node).merge(ParserResult.from_errors(error))

        items_path = add_child(type_path, "items")
        definition = ArrayType(name=name, path=type_path, items=items_path, description=description)
        items_result = self.parse_child(
            items, schema_id, items_path, default_name="items", property_name="items"
        )
        return register_type(definition, node).merge(items_result)


class TupleParser(ConstructParser):
    """Positional arrays: ``items`` is a list of schemas."""

    construct_name = "tuple"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return node.get("type") == "array" and isinstance(node.get("items"), list)

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        item_paths: list[TypePath] = []
        item_results: list[ParserResult] = []
        for index, item in enumerate(node["items"]):
            item_path = add_child(type_path, "items", index)
            item_paths.append(item_path)
            item_results.append(
                self.parse_child(
                    item, schema_id, item_path, default_name=str(index), property_name="items"
                )
            )

        definition = TupleType(
            name=name,
            path=type_path,
            items=tuple(item_paths),
            description=string_value(node, "description"),
        )
        return merge_all([register_type(definition, node), *item_results])
