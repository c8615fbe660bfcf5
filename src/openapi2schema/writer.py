"""Writes output documents to `<output_dir>/<identifier>.json`."""

from pathlib import Path

from openapi2schema.schema.models import OutputDocument


class SchemaWriter:
    """Persists one JSON file per resource, overwriting existing files."""

    def __init__(self, output_dir: Path, indent: int | None = None):
        self.output_dir = Path(output_dir)
        self.indent = indent

    def path_for(self, identifier: str) -> Path:
        return (self.output_dir / f"{identifier}.json").absolute()

    def write(self, identifier: str, document: OutputDocument) -> Path:
        """Serialize `document` as UTF-8 JSON and return the written path."""
        path = self.path_for(identifier)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.to_json(indent=self.indent) + "\n", encoding="utf-8")
        return path
