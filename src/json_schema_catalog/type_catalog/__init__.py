"""Type catalog exports."""

from .parser_results import EMPTY_PARSER_RESULT, ParserResult, TypeEntry, merge_all
from .schema_nodes import SchemaNode, get_type, string_value
from .schema_results import SchemaDefinition, SchemaResult
from .type_definitions import (
    AllOfType,
    AnyOfType,
    ArrayType,
    ConstType,
    EnumType,
    ObjectType,
    OneOfType,
    PrimitiveType,
    TupleType,
    TypeDefinition,
    TypeReference,
    UnionType,
)
from .type_paths import ROOT_TYPE_PATH, SchemaId, TypePath, add_child, normalize_uri

__all__ = [
    "SchemaNode",
    "SchemaId",
    "TypePath",
    "ROOT_TYPE_PATH",
    "add_child",
    "normalize_uri",
    "get_type",
    "string_value",
    "TypeDefinition",
    "AllOfType",
    "AnyOfType",
    "OneOfType",
    "ArrayType",
    "TupleType",
    "ObjectType",
    "TypeReference",
    "EnumType",
    "ConstType",
    "UnionType",
    "PrimitiveType",
    "ParserResult",
    "TypeEntry",
    "EMPTY_PARSER_RESULT",
    "merge_all",
    "SchemaDefinition",
    "SchemaResult",
]
