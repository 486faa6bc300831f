"""CLI entry point for api-typedef."""

import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from api_typedef.builder.diagnostics import BuildDiagnostics
from api_typedef.contract.loader import build_type_definitions, find_schemas, load_document
from api_typedef.errors import TypeDefinitionError
from api_typedef.models.properties import TypeDefinition

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _serialize(definitions: list[TypeDefinition], fmt: str) -> str:
    data = [td.model_dump(mode="json", by_alias=True, exclude_none=True) for td in definitions]
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


@click.group()
@click.option("--log-level", default=DEFAULT_LOG_LEVEL, type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Logging level.")
def main(log_level: str):
    """API Typedef: build renderable type definitions from OpenAPI schemas."""
    logging.basicConfig(level=log_level.upper(), format="%(name)s - %(levelname)s - %(message)s")


@main.command(name="list")
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def list_schemas(doc_path: Path):
    """List the schema names defined in an API document."""
    try:
        doc = load_document(doc_path)
        names = list(find_schemas(doc))
    except TypeDefinitionError as e:
        raise click.ClickException(str(e)) from e

    for name in names:
        click.echo(name)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.argument("names", nargs=-1)
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the type definitions to this file.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def show(doc_path: Path, names: tuple[str, ...], output: Path | None, fmt: str):
    """Build type definitions for NAMES (default: every schema in the document)."""
    diagnostics = BuildDiagnostics()
    try:
        doc = load_document(doc_path)
        definitions = build_type_definitions(doc, list(names), diagnostics=diagnostics)
    except (TypeDefinitionError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    result = _serialize(definitions, fmt)

    if output is None:
        click.echo(result)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result, encoding="utf-8")
        click.echo(f"Type definitions saved to {output}")

    if diagnostics.issues:
        click.echo(f"Skipped {len(diagnostics.issues)} properties.", err=True)
