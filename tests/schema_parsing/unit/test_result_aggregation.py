"""Multi-file aggregation tests."""

from __future__ import annotations

from json_schema_catalog.diagnostics import ErrorType
from json_schema_catalog.schema_parsing import aggregate_schema_results, parse_schema
from json_schema_catalog.type_catalog import SchemaResult

DRAFT_04 = "http://json-schema.org/draft-04/schema#"


def _schema_result(schema_id: str, file_path: str, **extra) -> SchemaResult:
    node = {"$schema": DRAFT_04, "id": schema_id, "type": "object", **extra}
    return parse_schema(node, file_path)


def test_distinct_schema_ids_are_combined() -> None:
    result = aggregate_schema_results(
        [
            _schema_result("http://ex.example/a", "a.json"),
            _schema_result("http://ex.example/b", "b.json"),
        ]
    )

    assert list(result.schema_dict) == ["http://ex.example/a", "http://ex.example/b"]
    assert [path for path, _errors in result.schema_errors] == ["a.json", "b.json"]
    assert result.error_count == 0


def test_failed_files_keep_their_error_entries() -> None:
    result = aggregate_schema_results(
        [
            _schema_result("http://ex.example/a", "a.json"),
            parse_schema({"id": "http://ex.example/b"}, "b.json"),
        ]
    )

    assert list(result.schema_dict) == ["http://ex.example/a"]
    assert result.schema_errors[1][0] == "b.json"
    assert result.schema_errors[1][1][0].error_type == ErrorType.MISSING_PROPERTY
    assert result.error_count == 1


def test_duplicate_schema_id_keeps_first_file_and_reports_later_one() -> None:
    first = _schema_result("http://ex.example/s", "first.json", title="First")
    second = _schema_result("http://ex.example/s", "second.json", title="Second")

    result = aggregate_schema_results([first, second])

    assert result.schema_dict["http://ex.example/s"].title == "First"
    duplicate_path, duplicate_errors = result.schema_errors[-1]
    assert duplicate_path == "second.json"
    assert duplicate_errors[0].error_type == ErrorType.DUPLICATE_SCHEMA_ID
    assert "first.json" in duplicate_errors[0].message


def test_aggregation_fold_is_associative_with_empty_identity() -> None:
    a = _schema_result("http://ex.example/a", "a.json")
    b = _schema_result("http://ex.example/a", "b.json")
    c = parse_schema({}, "c.json")

    assert a.merge(b).merge(c) == a.merge(b.merge(c))
    assert SchemaResult().merge(a) == a
    assert a.merge(SchemaResult()) == a
    assert aggregate_schema_results([]) == SchemaResult()


def test_warning_counts_cover_every_file() -> None:
    result = aggregate_schema_results(
        [
            _schema_result("http://ex.example/a", "a.json", required=["x"]),
            _schema_result("http://ex.example/b", "b.json", required=["y", "z"]),
        ]
    )

    assert result.warning_count == 3
