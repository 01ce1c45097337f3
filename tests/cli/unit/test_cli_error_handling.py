"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from json_schema_catalog.cli import main


def test_parse_without_inputs_returns_clean_error(capsys) -> None:
    exit_code = main(["parse"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Provide schema files" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["parse", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_format_choice_returns_usage_error(capsys) -> None:
    exit_code = main(["parse", "--format", "xml", "schema.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Traceback" not in captured.err


def test_missing_configuration_file_returns_clean_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["parse", "--config", str(tmp_path / "absent.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err


def test_unreadable_schema_returns_clean_error(tmp_path: Path, capsys) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{oops", encoding="utf-8")

    exit_code = main(["parse", str(broken)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid JSON" in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    existing = tmp_path / "catalog.yaml"
    existing.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(existing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err


def test_non_utf8_schema_returns_clean_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "bad.json"
    schema_path.write_bytes(b'{"title": "\xff\xfe"}')

    exit_code = main(["parse", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Could not read schema file" in captured.err
    assert "Traceback" not in captured.err
