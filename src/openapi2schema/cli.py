"""CLI entry point for openapi2schema."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from openapi2schema.catalog.openapi import load_catalog
from openapi2schema.config import DEFAULT_OUTPUT_DIR, GeneratorConfig
from openapi2schema.errors import CatalogError, MalformedReferenceError
from openapi2schema.schema.document import generate_schemas
from openapi2schema.schema.naming import parse_reference
from openapi2schema.writer import SchemaWriter


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """openapi2schema: turn OpenAPI definitions into per-resource JSON Schema files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o", "--output",
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    envvar="OPENAPI2SCHEMA_OUTPUT_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the generated <group>_<version>_<Kind>.json files.",
)
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "swagger", "openapi", "catalog"]), help="Document format.")
@click.option("--include", multiple=True, help="Only convert references matching this glob (repeatable).")
@click.option("--indent", default=None, type=click.IntRange(min=0), help="Pretty-print output with this indent.")
def generate(doc_path: Path, output: Path, fmt: str, include: tuple[str, ...], indent: int | None):
    """Write one JSON Schema file per definition in DOC_PATH."""
    try:
        config = GeneratorConfig(output_dir=output, doc_format=fmt, include=include, indent=indent)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    click.echo(f"Loading {doc_path} (format: {config.doc_format})...")
    try:
        catalog = load_catalog(doc_path, config.doc_format)
    except CatalogError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Found {len(catalog)} definitions.")

    writer = SchemaWriter(config.output_dir, indent=config.indent)
    report = generate_schemas(catalog, writer, include=config.include)

    click.echo(f"Wrote {len(report.written)} schemas to {config.output_dir} ({len(report.failures)} failed).")


@main.command()
@click.argument("ref")
def identify(ref: str):
    """Print the identifier, group/version and kind derived from REF."""
    try:
        identity = parse_reference(ref)
    except MalformedReferenceError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"identifier:    {identity.identifier}")
    click.echo(f"group_version: {identity.group_version}")
    click.echo(f"kind:          {identity.kind}")
