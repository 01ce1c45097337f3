"""Shared contract for schema construct parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from json_schema_catalog.diagnostics import invalid_type
from json_schema_catalog.type_catalog import (
    ROOT_TYPE_PATH,
    ParserResult,
    SchemaId,
    SchemaNode,
    TypeDefinition,
    TypePath,
    get_type,
    string_value,
)

ChildClassifier = Callable[[SchemaNode, SchemaId, TypePath, str], ParserResult]

ID_KEYS = ("$id", "id")


class ConstructParser(ABC):
    """Recognizes one schema construct by shape and resolves it into type entries.

    Parsers never classify nested schemas themselves; they hand each child to
    the classifier they were built with, at an extended type path, and merge
    what comes back.
    """

    construct_name: ClassVar[str]

    def __init__(self, classify_child: ChildClassifier) -> None:
        self._classify_child = classify_child

    @abstractmethod
    def recognizes(self, node: Mapping[str, Any]) -> bool:
        """Return True when ``node`` has this construct's shape."""

    @abstractmethod
    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        """Resolve ``node`` located at ``type_path`` into a parser result."""

    def parse_child(
        self,
        child: SchemaNode,
        schema_id: SchemaId,
        child_path: TypePath,
        *,
        default_name: str,
        property_name: str,
    ) -> ParserResult:
        """Classify one nested schema, reporting non-object children as invalid."""
        if not isinstance(child, Mapping):
            return ParserResult.from_errors(
                invalid_type(child_path, property_name, "object", get_type(child))
            )
        name = string_value(child, "title") or default_name
        return self._classify_child(child, schema_id, child_path, name)


def register_type(definition: TypeDefinition, node: Mapping[str, Any]) -> ParserResult:
    """Return a result holding ``definition``, aliased by the node's own id when nested."""
    if definition.path == ROOT_TYPE_PATH:
        return ParserResult.from_type(definition)
    own_id = next(
        (node[key] for key in ID_KEYS if key in node),
        None,
    )
    if isinstance(own_id, str) and own_id:
        return ParserResult.from_type(definition, own_id)
    return ParserResult.from_type(definition)
