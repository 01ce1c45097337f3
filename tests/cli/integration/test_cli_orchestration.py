"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from json_schema_catalog.cli import cli, main

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


def _write_schema(path: Path, node: dict) -> Path:
    path.write_text(json.dumps(node), encoding="utf-8")
    return path


def _valid_schema(tmp_path: Path) -> Path:
    return _write_schema(
        tmp_path / "person.json",
        {
            "$schema": DRAFT_07,
            "$id": "http://ex.example/person",
            "title": "Person",
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "definitions": {"Id": {"type": "integer"}},
        },
    )


def _samples_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def test_parse_prints_yaml_catalog(tmp_path: Path) -> None:
    runner = CliRunner()
    schema_path = _valid_schema(tmp_path)

    result = runner.invoke(cli, ["parse", str(schema_path)])

    assert result.exit_code == 0
    catalog = yaml.safe_load(result.output)
    types = catalog["schemas"]["http://ex.example/person"]["types"]
    assert types["#"]["kind"] == "object"
    assert types["#/definitions/Id"]["type"] == "integer"
    assert catalog["errors"] == []


def test_parse_writes_json_catalog_to_output(tmp_path: Path) -> None:
    runner = CliRunner()
    schema_path = _valid_schema(tmp_path)
    output_path = tmp_path / "catalog.json"

    result = runner.invoke(
        cli,
        ["parse", str(schema_path), "--format", "json", "--output", str(output_path)],
    )

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    catalog = json.loads(output_path.read_text(encoding="utf-8"))
    assert list(catalog["schemas"]) == ["http://ex.example/person"]


def test_parse_with_config_uses_configured_sources_and_output(tmp_path: Path) -> None:
    runner = CliRunner()
    _valid_schema(tmp_path)
    config_path = tmp_path / "catalog.yaml"
    config_path.write_text(
        "schemas:\n  paths: ['*.json']\noutput:\n  format: json\n  path: out/catalog.json\n",
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["parse", "--config", str(config_path)])

    assert result.exit_code == 0
    output_path = tmp_path / "out" / "catalog.json"
    assert "http://ex.example/person" in json.loads(output_path.read_text(encoding="utf-8"))[
        "schemas"
    ]


def test_parse_sample_schemas(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "samples.yaml"

    result = runner.invoke(
        cli,
        [
            "parse",
            str(_samples_dir() / "person-schema.json"),
            str(_samples_dir() / "address-schema.yaml"),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0
    catalog = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    assert set(catalog["schemas"]) == {
        "http://example.com/schemas/person",
        "urn:example:address",
    }


def test_parse_reports_schema_errors_with_exit_code(tmp_path: Path, capsys) -> None:
    good = _valid_schema(tmp_path)
    bad = _write_schema(tmp_path / "bad.json", {"$schema": "http://example.org/x"})

    exit_code = main(["parse", str(good), str(bad)])
    captured = capsys.readouterr()

    assert exit_code == 1
    catalog = yaml.safe_load(captured.out)
    assert list(catalog["schemas"]) == ["http://ex.example/person"]
    assert catalog["errors"][0]["file_path"] == str(bad)
    assert "1 schema error(s)" in captured.err


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "catalog.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert str(output_path.resolve()) in result.output
