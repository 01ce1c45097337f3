"""Leaf construct parsers for enums, constants and primitive types."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_schema_catalog.type_catalog import (
    ConstType,
    EnumType,
    ParserResult,
    PrimitiveType,
    SchemaId,
    TypePath,
    UnionType,
    string_value,
)

from .construct_contract import ConstructParser, register_type

PRIMITIVE_TYPES = frozenset({"null", "boolean", "integer", "number", "string"})


class EnumParser(ConstructParser):
    construct_name = "enum"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return isinstance(node.get("enum"), list)

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        definition = EnumType(
            name=name,
            path=type_path,
            type=string_value(node, "type"),
            values=tuple(node["enum"]),
            description=string_value(node, "description"),
        )
        return register_type(definition, node)


class ConstParser(ConstructParser):
    construct_name = "const"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return "const" in node

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        definition = ConstType(
            name=name,
            path=type_path,
            type=string_value(node, "type"),
            const=node["const"],
            description=string_value(node, "description"),
        )
        return register_type(definition, node)


class UnionParser(ConstructParser):
    """``type`` given as a list of type names, e.g. ``["string", "null"]``."""

    construct_name = "union"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        node_type = node.get("type")
        return (
            isinstance(node_type, list)
            and len(node_type) > 0
            and all(isinstance(item, str) for item in node_type)
        )

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        definition = UnionType(
            name=name,
            path=type_path,
            types=tuple(node["type"]),
            description=string_value(node, "description"),
        )
        return register_type(definition, node)


class PrimitiveParser(ConstructParser):
    construct_name = "primitive"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        node_type = node.get("type")
        return isinstance(node_type, str) and node_type in PRIMITIVE_TYPES

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        definition = PrimitiveType(
            name=name,
            path=type_path,
            type=node["type"],
            description=string_value(node, "description"),
        )
        return register_type(definition, node)
