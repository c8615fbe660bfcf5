"""Document assembly: one output document per catalog definition."""

import logging
from fnmatch import fnmatchcase
from pathlib import Path

import click
from pydantic import BaseModel

from openapi2schema.catalog.base import Catalog
from openapi2schema.catalog.resolver import resolve
from openapi2schema.errors import ConversionError
from openapi2schema.schema.converter import convert
from openapi2schema.schema.models import OutputDocument
from openapi2schema.schema.naming import parse_reference
from openapi2schema.writer import SchemaWriter

logger = logging.getLogger(__name__)


class GenerationFailure(BaseModel):
    ref: str
    message: str


class GenerationReport(BaseModel):
    """Outcome of a batch run over a catalog."""

    written: list[Path] = []
    failures: list[GenerationFailure] = []


def build_document(catalog: Catalog, ref: str) -> OutputDocument:
    """Build the fully inlined output document for the definition at `ref`."""
    definition = resolve(catalog, ref)
    return OutputDocument(
        title=parse_reference(ref).identifier,
        description=definition.description,
        properties=convert(catalog, definition.properties, ref),
        required=definition.required or None,
    )


def generate_schemas(
    catalog: Catalog,
    writer: SchemaWriter,
    include: tuple[str, ...] | list[str] = (),
) -> GenerationReport:
    """Convert and write every definition in the catalog.

    A failing definition is reported on stdout and skipped; the batch always
    runs to the end. `include` restricts the run to references matching any
    of the given glob patterns.
    """
    report = GenerationReport()
    for ref in catalog.references():
        if include and not _matches(ref, include):
            continue
        try:
            document = build_document(catalog, ref)
            path = writer.write(document.title, document)
        except (ConversionError, OSError) as e:
            click.echo(f"{ref} resolve err: {e}")
            report.failures.append(GenerationFailure(ref=ref, message=str(e)))
            continue
        if path in report.written:
            logger.warning("%s overwrote %s, written earlier in this run for another reference", ref, path)
        logger.debug("Wrote %s to %s", ref, path)
        report.written.append(path)
    return report


def _matches(ref: str, patterns: tuple[str, ...] | list[str]) -> bool:
    return any(fnmatchcase(ref, pattern) for pattern in patterns)
