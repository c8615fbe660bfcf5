"""Output models: the simplified JSON Schema written for each resource."""

import json
from typing import Any

from pydantic import BaseModel


class OutputProperty(BaseModel):
    """A converted field. Unset optional keys are omitted on output."""

    title: str
    type: str
    const: str | None = None
    enum: list[Any] | None = None
    properties: dict[str, "OutputProperty"] | None = None  # object
    items: dict[str, dict[str, "OutputProperty"]] | None = None  # array


OutputProperty.model_rebuild()


class OutputDocument(BaseModel):
    """Top-level schema for one resource kind."""

    properties: dict[str, OutputProperty]
    title: str
    type: str = "object"
    description: str = ""
    required: list[str] | None = None

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
