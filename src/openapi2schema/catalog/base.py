"""Data models for the definition catalog.

Every supported input format (Swagger 2.0, OpenAPI 3.x, a bare catalog
mapping) is loaded into these models before conversion.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# JSON pointer prefixes stripped from `$ref` so a reference equals its catalog key
REF_PREFIXES = ("#/definitions/", "#/components/schemas/")


def normalize_ref(ref: str) -> str:
    """Strip a local JSON pointer prefix from a reference string."""
    for prefix in REF_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix):]
    return ref


def _default_if_none(cls, value: Any, info: ValidationInfo) -> Any:
    if value is None:
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


def _string_keys(value: Any) -> Any:
    # YAML 1.1 reads keys such as `on` or `yes` as booleans; `key:` with no value is null
    if isinstance(value, dict):
        return {str(key): {} if item is None else item for key, item in value.items()}
    return value


class FieldSchema(BaseModel):
    """Schema of a single field: a primitive, a reference or an array."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str | list[str] | None = None
    ref: str | None = Field(default=None, alias="$ref")
    items: "FieldSchema | None" = None
    enum: list[Any] | None = None
    description: str = ""
    format: str | None = None
    properties: dict[str, "FieldSchema"] = {}
    all_of: list["FieldSchema"] = Field(default=[], alias="allOf")
    one_of: list["FieldSchema"] = Field(default=[], alias="oneOf")
    any_of: list["FieldSchema"] = Field(default=[], alias="anyOf")

    @field_validator("description", "properties", "all_of", "one_of", "any_of", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _default_if_none(cls, value, info)

    @field_validator("properties", mode="before")
    @classmethod
    def _property_names(cls, value: Any) -> Any:
        return _string_keys(value)

    @field_validator("ref")
    @classmethod
    def _strip_pointer(cls, value: str | None) -> str | None:
        return normalize_ref(value) if value else value

    @field_validator("items", mode="before")
    @classmethod
    def _single_items(cls, value: Any) -> Any:
        # Tuple-style `items: [...]` keeps only its first schema
        if isinstance(value, list):
            return value[0] if value else None
        return value

    @property
    def type_tag(self) -> str | None:
        """The primary type name, ignoring `null` in OpenAPI 3.1 type lists."""
        if isinstance(self.type, list):
            types = [t for t in self.type if t != "null"]
            return types[0] if types else None
        return self.type or None


FieldSchema.model_rebuild()


class Definition(BaseModel):
    """A named schema describing one resource's shape."""

    model_config = ConfigDict(extra="ignore")

    description: str = ""
    properties: dict[str, FieldSchema] = {}
    required: list[str] = []

    @field_validator("description", "properties", "required", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _default_if_none(cls, value, info)

    @field_validator("properties", mode="before")
    @classmethod
    def _property_names(cls, value: Any) -> Any:
        return _string_keys(value)

    @field_validator("required", mode="before")
    @classmethod
    def _required_names(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [str(name) for name in value]
        return value


class Catalog(BaseModel, frozen=True):
    """Immutable mapping from type reference to definition."""

    definitions: dict[str, Definition] = {}

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "Catalog":
        """Build a catalog from a mapping of reference -> raw schema dict."""
        return cls(definitions={normalize_ref(str(ref)): schema or {} for ref, schema in raw.items()})

    def references(self) -> list[str]:
        """All references in the catalog, sorted."""
        return sorted(self.definitions)

    def __contains__(self, ref: object) -> bool:
        return ref in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)
