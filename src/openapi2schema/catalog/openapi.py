"""Definition catalog loader.

Reads Swagger 2.0 (`definitions`), OpenAPI 3.x (`components.schemas`) and
bare catalog documents (reference -> schema, optionally wrapped in a
`schema` key as emitted by kube-openapi) into a Catalog.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from openapi2schema.catalog.base import Catalog
from openapi2schema.catalog.detect import FORMATS, detect_format, read_document
from openapi2schema.errors import CatalogError

logger = logging.getLogger(__name__)


def load_catalog(file_path: Path, fmt: str = "auto") -> Catalog:
    """Load the definitions of a document on disk into a Catalog."""
    document = read_document(file_path)
    if fmt == "auto":
        fmt = detect_format(document)
        logger.debug("Detected %s format for %s", fmt, file_path)
    return catalog_from_document(document, fmt)


def catalog_from_document(document: dict, fmt: str) -> Catalog:
    """Extract the definitions section of an already-parsed document."""
    if fmt == "swagger":
        raw = document.get("definitions") or {}
    elif fmt == "openapi":
        raw = (document.get("components") or {}).get("schemas") or {}
    elif fmt == "catalog":
        raw = {ref: _unwrap_schema(entry) for ref, entry in document.items()}
    else:
        raise CatalogError(f"Unsupported format {fmt!r}, expected one of {', '.join(FORMATS)}")

    if not isinstance(raw, dict):
        raise CatalogError(f"Definitions section of a {fmt} document must be a mapping")

    try:
        catalog = Catalog.from_raw(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid definitions: {e}") from e

    logger.debug("Loaded %d definitions", len(catalog))
    return catalog


def _unwrap_schema(entry: dict) -> dict:
    for key in ("schema", "Schema"):
        if isinstance(entry.get(key), dict):
            return entry[key]
    return entry
