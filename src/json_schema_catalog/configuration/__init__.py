"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import LOG_LEVELS, ConfigurationError, load_configuration
from .runtime_settings import (
    Configuration,
    LoggingSettings,
    OutputSettings,
    SchemaSourceSettings,
)

__all__ = [
    "Configuration",
    "LoggingSettings",
    "OutputSettings",
    "SchemaSourceSettings",
    "ConfigurationError",
    "LOG_LEVELS",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
