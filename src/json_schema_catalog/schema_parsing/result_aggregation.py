"""Multi-file schema result aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from json_schema_catalog.type_catalog import SchemaResult


def aggregate_schema_results(results: Iterable[SchemaResult]) -> SchemaResult:
    """Fold per-file results, in order, into one multi-file result.

    The first file to declare a schema id keeps it; later files declaring
    the same id are reported in ``schema_errors`` under their own paths.
    """
    return reduce(SchemaResult.merge, results, SchemaResult())
