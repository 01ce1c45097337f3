"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSourceSettings:
    """Schema files selected by the configuration, in catalog order."""

    paths: tuple[Path, ...]


@dataclass(frozen=True)
class OutputSettings:
    """Catalog rendering target."""

    output_format: str
    path: Path | None


@dataclass(frozen=True)
class LoggingSettings:
    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schemas: SchemaSourceSettings
    output: OutputSettings
    logging: LoggingSettings
