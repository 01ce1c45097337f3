"""Definitions container parser."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_schema_catalog.diagnostics import invalid_type
from json_schema_catalog.type_catalog import (
    ParserResult,
    SchemaId,
    TypePath,
    add_child,
    get_type,
    merge_all,
)

from .construct_contract import ConstructParser

DEFINITIONS_KEYS = ("definitions", "$defs")


class DefinitionsParser(ConstructParser):
    """Resolves every named entry of ``definitions`` and ``$defs``.

    Each entry is classified at ``<path>/<container>/<name>`` under the
    entry's key; the container itself produces no type.
    """

    construct_name = "definitions"

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        return any(key in node for key in DEFINITIONS_KEYS)

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        results: list[ParserResult] = []
        for container_key in DEFINITIONS_KEYS:
            if container_key not in node:
                continue
            container = node[container_key]
            if not isinstance(container, Mapping):
                error = invalid_type(type_path, container_key, "object", get_type(container))
                results.append(ParserResult.from_errors(error))
                continue
            for definition_name, definition_node in container.items():
                results.append(
                    self.parse_child(
                        definition_node,
                        schema_id,
                        add_child(type_path, container_key, definition_name),
                        default_name=definition_name,
                        property_name=definition_name,
                    )
                )
        return merge_all(results)
