"""Generator configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_OUTPUT_DIR = Path("doc/schema")


class GeneratorConfig(BaseModel, frozen=True):
    """Settings for one `generate` run."""

    output_dir: Path = DEFAULT_OUTPUT_DIR
    doc_format: Literal["auto", "swagger", "openapi", "catalog"] = "auto"
    include: tuple[str, ...] = ()
    indent: int | None = Field(default=None, ge=0)
