"""Auto-detect the format of a definitions document."""

import json
from pathlib import Path

import yaml

from openapi2schema.errors import CatalogError

FORMATS = ("swagger", "openapi", "catalog")


def read_document(file_path: Path) -> dict:
    """Read a YAML or JSON document into a mapping."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Cannot read {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        # JSON with tabs or other constructs YAML rejects
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError) as e:
            raise CatalogError(f"{file_path} is neither YAML nor JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"{file_path} does not contain a mapping at the top level")
    return data


def detect_format(document: dict) -> str:
    """Detect the format of a parsed definitions document.

    Returns: 'swagger', 'openapi', or 'catalog'.
    """
    if "swagger" in document:
        return "swagger"
    if "openapi" in document:
        return "openapi"
    if all(isinstance(entry, dict) for entry in document.values()):
        return "catalog"
    raise CatalogError("Unrecognized document: expected Swagger 2.0, OpenAPI 3.x or a definitions catalog")
