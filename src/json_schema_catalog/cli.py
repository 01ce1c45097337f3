"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from json_schema_catalog.catalog_building import (
    CatalogBuildError,
    CatalogRequest,
    build_schema_catalog,
)
from json_schema_catalog.configuration import (
    DEFAULT_CONFIG_FILENAME,
    LOG_LEVELS,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from json_schema_catalog.results_writing import OUTPUT_FORMATS

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-schema-catalog")
def cli() -> None:
    """Build type catalogs from JSON Schema documents."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML catalog configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML catalog configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="parse")
@click.argument("schema_files", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML catalog configuration file",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(OUTPUT_FORMATS),
    help="Catalog output format (defaults to the configured format, or yaml)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to write the catalog to instead of stdout",
)
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level for diagnostics written to stderr",
)
def parse_schemas(
    schema_files: tuple[str, ...],
    config_path: str | None,
    output_format: str | None,
    output_path: str | None,
    log_level: str | None,
) -> None:
    """Parse JSON Schema files into a type catalog."""
    request, configured_level = _build_request(
        schema_files, config_path, output_format, output_path
    )
    _configure_logging(log_level or configured_level)

    try:
        outcome = build_schema_catalog(request)
    except CatalogBuildError as exc:
        raise CliError(str(exc)) from exc

    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    else:
        click.echo(outcome.rendered, nl=False)
    if outcome.error_count:
        raise CliError(
            f"{outcome.error_count} schema error(s) reported across "
            f"{len(request.schema_paths)} file(s)."
        )


def _build_request(
    schema_files: tuple[str, ...],
    config_path: str | None,
    output_format: str | None,
    output_path: str | None,
) -> tuple[CatalogRequest, str]:
    schema_paths = [Path(schema_file) for schema_file in schema_files]
    configured_format = "yaml"
    configured_output: Path | None = None
    configured_level = "WARNING"
    if config_path is not None:
        try:
            configuration = load_configuration(config_path)
        except ConfigurationError as exc:
            raise CliError(str(exc)) from exc
        schema_paths.extend(configuration.schemas.paths)
        configured_format = configuration.output.output_format
        configured_output = configuration.output.path
        configured_level = configuration.logging.level

    if not schema_paths:
        raise CliError("Provide schema files as arguments or via --config.")
    request = CatalogRequest(
        schema_paths=tuple(schema_paths),
        output_path=Path(output_path) if output_path else configured_output,
        output_format=output_format or configured_format,
    )
    return request, configured_level


def _configure_logging(level: str) -> None:
    logging.basicConfig(stream=sys.stderr, format=_LOG_FORMAT)
    logging.getLogger("json_schema_catalog").setLevel(level.upper())


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
