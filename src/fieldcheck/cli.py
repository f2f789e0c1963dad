"""Command line interface: ``fieldcheck check`` and ``fieldcheck compile``."""

import json
import logging
import os
import re
import sys
from typing import Any

import click

from .config import load_settings
from .errors import SchemaDefinitionError
from .loaders import load_document_from_file
from .schema import Schema
from .version import PACKAGE_VERSION


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(debug: bool = False) -> None:
    """Configure the root logger for command line use."""
    if not debug:
        debug = get_env_flag("FIELDCHECK_DEBUG")

    log_level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    root_logger.addHandler(handler)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, re.Pattern):
        return obj.pattern
    return str(obj)


def _load_schema(schema_file: str, config: str | None) -> Schema:
    try:
        return Schema.from_file(schema_file, settings=load_settings(config))
    except (SchemaDefinitionError, ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(PACKAGE_VERSION, prog_name="fieldcheck")
def cli() -> None:
    """fieldcheck - validate YAML/JSON documents against a schema."""


@cli.command(name="check")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", type=click.Path(dir_okay=False), help="Path to a fieldcheck.yaml settings file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def check(schema_file: str, data_file: str, config: str | None, json_output: bool, debug: bool) -> None:
    """Validate DATA_FILE against SCHEMA_FILE.

    Every problem in the document is reported in one run.

    Examples:
        fieldcheck check user.schema.yaml user.json
        fieldcheck check user.schema.yaml user.json --json-output
    """
    configure_logging(debug)
    schema = _load_schema(schema_file, config)

    try:
        document = load_document_from_file(data_file)
        errors = schema.errors(document)
    except (ValueError, TypeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if json_output:
        status = "invalid" if errors else "ok"
        click.echo(json.dumps({"status": status, "errors": errors}, indent=2))
    elif errors:
        for path, message in errors.items():
            click.echo(f"{path}: {message}")
    else:
        click.echo("OK")

    if errors:
        sys.exit(1)


@cli.command(name="compile")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", type=click.Path(dir_okay=False), help="Path to a fieldcheck.yaml settings file")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def compile_command(schema_file: str, config: str | None, debug: bool) -> None:
    """Print the canonical form of SCHEMA_FILE as JSON."""
    configure_logging(debug)
    schema = _load_schema(schema_file, config)
    click.echo(json.dumps(schema.schema, indent=2, default=_json_default))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
