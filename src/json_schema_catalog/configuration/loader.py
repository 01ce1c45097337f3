"""Configuration loader service."""

from __future__ import annotations

import glob
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from json_schema_catalog.results_writing.catalog_writer import OUTPUT_FORMATS

from .runtime_settings import (
    Configuration,
    LoggingSettings,
    OutputSettings,
    SchemaSourceSettings,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT_FORMAT = "yaml"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    schemas = _parse_schemas_section(parsed.get("schemas"), base_path)
    output = _parse_output_section(parsed.get("output"), base_path)
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(
        path=path,
        schemas=schemas,
        output=output,
        logging=logging_settings,
    )


def _parse_schemas_section(value: Any, base_path: Path) -> SchemaSourceSettings:
    section = _require_mapping(value, "schemas")
    raw_paths = section.get("paths")
    if isinstance(raw_paths, str):
        raw_paths = [raw_paths]
    if not isinstance(raw_paths, Sequence) or not raw_paths:
        raise ConfigurationError("schemas.paths must be a non-empty list of paths.")

    resolved: list[Path] = []
    for raw_path in raw_paths:
        pattern = _require_non_empty_string(raw_path, "schemas.paths entry")
        for schema_path in _expand_schema_pattern(base_path, pattern):
            if schema_path not in resolved:
                resolved.append(schema_path)
    return SchemaSourceSettings(paths=tuple(resolved))


def _expand_schema_pattern(base_path: Path, pattern: str) -> list[Path]:
    candidate = _resolve_path(base_path, pattern)
    if glob.has_magic(pattern):
        matches = sorted(Path(match) for match in glob.glob(str(candidate), recursive=True))
        files = [match for match in matches if match.is_file()]
        if not files:
            raise ConfigurationError(f"No schema files match pattern: {pattern}")
        return files
    if not candidate.is_file():
        raise ConfigurationError(f"Schema file not found: {candidate}")
    return [candidate]


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    output_format = _require_non_empty_string(
        section.get("format", DEFAULT_OUTPUT_FORMAT), "output.format"
    ).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}; got '{output_format}'."
        )
    raw_path = _optional_string(section.get("path"), "output.path")
    output_path = _resolve_path(base_path, raw_path) if raw_path else None
    return OutputSettings(output_format=output_format, path=output_path)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _require_non_empty_string(
        section.get("level", DEFAULT_LOG_LEVEL), "logging.level"
    ).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of {', '.join(LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
