"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from swagger_model_compiler.compilation import CompilationError, compile_configured_specification
from swagger_model_compiler.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    write_placeholder_configuration,
)
from swagger_model_compiler.definition_ingestion import DocumentFormatError
from swagger_model_compiler.schema_reporting import describe_schemas, write_schema_workbook


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="swagger-model-compiler")
@click.option("-v", "--verbose", count=True, help="Log progress (-v) or resolution details (-vv).")
def cli(verbose: int) -> None:
    """Compile swagger definitions into persistence-ready schemas."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="compile")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format of the schema description",
)
def compile_schemas(config_path: str, output_format: str) -> None:
    """Resolve the swagger definitions and bind declared models."""
    try:
        outcome = compile_configured_specification(config_path)
    except (ConfigurationError, DocumentFormatError, CompilationError, OSError) as exc:
        raise CliError(str(exc)) from exc

    report = {
        "schemas": describe_schemas(outcome.schemas),
        "collections": {
            model_name: getattr(handle, "name", model_name)
            for model_name, handle in outcome.models.items()
        },
    }
    if output_format == "yaml":
        click.echo(yaml.safe_dump(report, sort_keys=False).rstrip())
    else:
        click.echo(json.dumps(report, indent=2))


@cli.command(name="export-schemas")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the schema workbook to write",
)
def export_schemas(config_path: str, output_path: str) -> None:
    """Write resolved schemas and bound collections to a workbook."""
    try:
        outcome = compile_configured_specification(config_path)
        written = write_schema_workbook(outcome.schemas, output_path, outcome.models)
    except (ConfigurationError, DocumentFormatError, CompilationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


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
