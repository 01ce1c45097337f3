"""Construct parsing exports."""

from .collection_parsers import ArrayParser, TupleParser
from .composition_parsers import AllOfParser, AnyOfParser, CompositionParser, OneOfParser
from .construct_contract import ChildClassifier, ConstructParser, register_type
from .construct_dispatch import (
    CORE_CONSTRUCT_PRIORITY,
    NESTED_CLASSIFIER,
    ROOT_CLASSIFIER,
    VALUE_CONSTRUCT_PRIORITY,
    ConstructClassifier,
    construct_name_for,
)
from .definitions_parser import DEFINITIONS_KEYS, DefinitionsParser
from .object_parser import ObjectParser
from .type_reference_parser import TypeReferenceParser
from .value_parsers import ConstParser, EnumParser, PrimitiveParser, UnionParser

__all__ = [
    "ChildClassifier",
    "ConstructParser",
    "register_type",
    "CompositionParser",
    "AllOfParser",
    "AnyOfParser",
    "OneOfParser",
    "ArrayParser",
    "TupleParser",
    "ObjectParser",
    "TypeReferenceParser",
    "EnumParser",
    "ConstParser",
    "UnionParser",
    "PrimitiveParser",
    "DefinitionsParser",
    "DEFINITIONS_KEYS",
    "ConstructClassifier",
    "CORE_CONSTRUCT_PRIORITY",
    "VALUE_CONSTRUCT_PRIORITY",
    "NESTED_CLASSIFIER",
    "ROOT_CLASSIFIER",
    "construct_name_for",
]
