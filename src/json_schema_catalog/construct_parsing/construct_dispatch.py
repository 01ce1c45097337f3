"""Construct classification and dispatch.

Constructs are tried in a fixed priority order and the first one whose
predicate matches parses the node. Nodes that match no construct, and
non-object nodes, contribute nothing: they yield the empty result without a
diagnostic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from json_schema_catalog.type_catalog import (
    EMPTY_PARSER_RESULT,
    ParserResult,
    SchemaId,
    SchemaNode,
    TypePath,
)

from .collection_parsers import ArrayParser, TupleParser
from .composition_parsers import AllOfParser, AnyOfParser, OneOfParser
from .construct_contract import ConstructParser
from .object_parser import ObjectParser
from .type_reference_parser import TypeReferenceParser
from .value_parsers import ConstParser, EnumParser, PrimitiveParser, UnionParser

_LOGGER = logging.getLogger("json_schema_catalog.construct_parsing")

CORE_CONSTRUCT_PRIORITY: tuple[type[ConstructParser], ...] = (
    AllOfParser,
    AnyOfParser,
    ArrayParser,
    ObjectParser,
    OneOfParser,
    TupleParser,
    TypeReferenceParser,
)

VALUE_CONSTRUCT_PRIORITY: tuple[type[ConstructParser], ...] = (
    EnumParser,
    ConstParser,
    UnionParser,
    PrimitiveParser,
)


class ConstructClassifier:
    """Dispatches schema nodes to the first matching construct parser.

    Args:
      construct_types: Parser classes in priority order.
      child_classifier: Classifier used for nested schemas; defaults to this one.
    """

    def __init__(
        self,
        construct_types: Sequence[type[ConstructParser]],
        *,
        child_classifier: ConstructClassifier | None = None,
    ) -> None:
        classify_child = child_classifier.classify if child_classifier else self.classify
        self._parsers = tuple(construct_type(classify_child) for construct_type in construct_types)

    @property
    def construct_names(self) -> tuple[str, ...]:
        return tuple(parser.construct_name for parser in self._parsers)

    def select(self, node: SchemaNode) -> ConstructParser | None:
        """Return the highest-priority parser recognizing ``node``, if any."""
        if not isinstance(node, Mapping):
            return None
        for parser in self._parsers:
            if parser.recognizes(node):
                return parser
        return None

    def classify(
        self, node: SchemaNode, schema_id: SchemaId, type_path: TypePath, name: str
    ) -> ParserResult:
        parser = self.select(node)
        if parser is None:
            _LOGGER.debug("No construct recognized at %s; skipping", type_path)
            return EMPTY_PARSER_RESULT
        _LOGGER.debug("Parsing %s as %s", type_path, parser.construct_name)
        return parser.parse(node, schema_id, type_path, name)


NESTED_CLASSIFIER = ConstructClassifier(CORE_CONSTRUCT_PRIORITY + VALUE_CONSTRUCT_PRIORITY)
ROOT_CLASSIFIER = ConstructClassifier(CORE_CONSTRUCT_PRIORITY, child_classifier=NESTED_CLASSIFIER)


def construct_name_for(node: Any, *, root: bool = False) -> str | None:
    """Return the name of the construct ``node`` would be parsed as."""
    classifier = ROOT_CLASSIFIER if root else NESTED_CLASSIFIER
    parser = classifier.select(node)
    return parser.construct_name if parser else None
