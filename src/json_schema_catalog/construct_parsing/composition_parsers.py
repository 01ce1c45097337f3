"""allOf / anyOf / oneOf construct parsers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from json_schema_catalog.type_catalog import (
    AllOfType,
    AnyOfType,
    OneOfType,
    ParserResult,
    SchemaId,
    TypePath,
    add_child,
    merge_all,
    string_value,
)

from .construct_contract import ConstructParser, register_type


class CompositionParser(ConstructParser):
    """Parser for a keyword holding a non-empty list of member schemas."""

    keyword: ClassVar[str]
    definition_type: ClassVar[type[AllOfType] | type[AnyOfType] | type[OneOfType]]

    def recognizes(self, node: Mapping[str, Any]) -> bool:
        members = node.get(self.keyword)
        return isinstance(members, list) and len(members) > 0

    def parse(
        self, node: Mapping[str, Any], schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        member_paths: list[TypePath] = []
        member_results: list[ParserResult] = []
        for index, member in enumerate(node[self.keyword]):
            member_path = add_child(type_path, self.keyword, index)
            member_paths.append(member_path)
            member_results.append(
                self.parse_child(
                    member,
                    schema_id,
                    member_path,
                    default_name=str(index),
                    property_name=self.keyword,
                )
            )

        definition = self.definition_type(
            name=name,
            path=type_path,
            types=tuple(member_paths),
            description=string_value(node, "description"),
        )
        return merge_all([register_type(definition, node), *member_results])


class AllOfParser(CompositionParser):
    construct_name = "all_of"
    keyword = "allOf"
    definition_type = AllOfType


class AnyOfParser(CompositionParser):
    construct_name = "any_of"
    keyword = "anyOf"
    definition_type = AnyOfType


class OneOfParser(CompositionParser):
    construct_name = "one_of"
    keyword = "oneOf"
    definition_type = OneOfType
