"""``$ref`` construct parser."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from json_schema_catalog.diagnostics import invalid_uri
from json_schema_catalog.type_catalog import ParserResult, SchemaId, TypePath, TypeReference

from .construct_contract import ConstructParser, register_type


class TypeReferenceParser(ConstructParser):
    """Records the ``$ref`` target as written; targets are resolved downstream."""

    construct_name = "type_reference"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return isinstance(node.get("$ref"), str)

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        target = node["$ref"]
        if not _is_valid_reference(target):
            return ParserResult.from_errors(invalid_uri(type_path, "$ref", target))

        definition = TypeReference(name=name, path=type_path, target=target)
        return register_type(definition, node)


def _is_valid_reference(target: str) -> bool:
    if not target.strip() or any(character.isspace() for character in target):
        return False
    try:
        urlsplit(target)
    except ValueError:
        return False
    return True
