"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "catalog.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Catalog configuration template for json-schema-catalog.
# Replace every <REQUIRED> placeholder before running parse --config.
# Relative paths are resolved against the directory of this file.

schemas:
  # Schema files or glob patterns (draft-04 or draft-07, JSON or YAML).
  paths:
    - "<REQUIRED>"

output:
  # Catalog format: yaml or json.
  format: yaml
  # Destination file; the catalog is printed to stdout when omitted.
  # path: "<OPTIONAL>"

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: WARNING
"""


def build_placeholder_configuration() -> str:
    """Build a YAML catalog configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder catalog configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Catalog configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
