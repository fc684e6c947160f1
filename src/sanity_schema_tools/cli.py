"""Command line interface entry point."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from importlib.metadata import version
from pathlib import Path
from typing import Any

import click

from sanity_schema_tools.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from sanity_schema_tools.schema_management import (
    SchemaUnavailableError,
    TypeNotFoundError,
    get_type_with_references,
    list_type_names,
    load_snapshot,
)
from sanity_schema_tools.tool_dispatch import ToolContext, build_default_registry
from sanity_schema_tools.tool_server import run_stdio_server

PACKAGE_NAME = "sanity-schema-tools"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CliError(Exception):
    """Custom CLI error."""


_config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Path to the YAML configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
)
_project_option = click.option(
    "--project-id", "project_id", required=True, help="Sanity project ID"
)
_dataset_option = click.option(
    "--dataset",
    "dataset",
    required=False,
    help="Dataset name (defaults to schema_store.default_dataset)",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name=PACKAGE_NAME)
def cli() -> None:
    """Sanity schema and content discovery tools."""


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
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-types")
@_config_option
@_project_option
@_dataset_option
@click.option(
    "--all-types",
    is_flag=True,
    default=False,
    help="Include object, array and other non-document types.",
)
def list_types(
    config_path: str | None, project_id: str, dataset: str | None, all_types: bool
) -> None:
    """List schema type names and kinds."""
    try:
        configuration = _resolve_configuration(config_path)
        snapshot = load_snapshot(configuration.schema_store, project_id, dataset)
    except (ConfigurationError, SchemaUnavailableError) as exc:
        raise CliError(str(exc)) from exc
    _echo_json(list_type_names(snapshot, include_non_document_kinds=all_types))


@cli.command(name="show-type")
@_config_option
@_project_option
@_dataset_option
@click.option(
    "--include-references",
    is_flag=True,
    default=False,
    help="Add every type the requested type references, directly or indirectly.",
)
@click.argument("type_name")
def show_type(
    config_path: str | None,
    project_id: str,
    dataset: str | None,
    include_references: bool,
    type_name: str,
) -> None:
    """Print the schema definition of TYPE_NAME."""
    try:
        configuration = _resolve_configuration(config_path)
        snapshot = load_snapshot(configuration.schema_store, project_id, dataset)
        payload = get_type_with_references(
            snapshot, type_name, include_references=include_references
        )
    except (ConfigurationError, SchemaUnavailableError, TypeNotFoundError) as exc:
        raise CliError(str(exc)) from exc
    _echo_json(payload)


@cli.command(name="list-tools")
@_config_option
def list_tools(config_path: str | None) -> None:
    """List the tools served by the `serve` command."""
    try:
        configuration = _resolve_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    registry = build_default_registry(ToolContext.from_configuration(configuration))
    for tool in registry.definitions():
        click.echo(f"{tool.name}\t{tool.description}")


@cli.command(name="serve")
@_config_option
@click.option(
    "--log-level",
    "log_level",
    default="INFO",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for messages written to stderr",
)
def serve(config_path: str | None, log_level: str) -> None:
    """Serve the tools over MCP on stdin/stdout."""
    # stdout carries protocol frames; logs must go to stderr.
    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT, stream=sys.stderr)
    try:
        configuration = _resolve_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    registry = build_default_registry(ToolContext.from_configuration(configuration))
    asyncio.run(run_stdio_server(registry, version=version(PACKAGE_NAME)))


def _resolve_configuration(config_path: str | None) -> Configuration:
    if config_path:
        return load_configuration(config_path)
    fallback = Path(DEFAULT_CONFIG_FILENAME)
    if fallback.exists():
        return load_configuration(fallback)
    return default_configuration()


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


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
