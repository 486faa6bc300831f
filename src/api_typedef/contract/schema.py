"""Schema object contract consumed by the type definition builder.

Mirrors the subset of an OpenAPI "schema object" the builder reads.
Child properties are kept as raw mappings and validated one at a time,
so a malformed child only affects itself.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

COMBINATION_KEYS = ("allOf", "anyOf", "oneOf", "not")


class SchemaFragment(BaseModel):
    """A single JSON-Schema-like fragment (read-only)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    type: str | None = None
    format: str | None = None
    title: str | None = None
    description: str | None = None
    example: Any = None
    enum: list[Any] | None = None
    properties: dict[str, Any] | None = None
    required: list[str] | None = None
    items: "SchemaFragment | None" = None  # array element or indexer value
    ref: str | None = Field(default=None, alias="$ref")
    all_of: "list[SchemaFragment] | None" = Field(default=None, alias="allOf")
    any_of: "list[SchemaFragment] | None" = Field(default=None, alias="anyOf")
    one_of: "list[SchemaFragment] | None" = Field(default=None, alias="oneOf")
    not_: "list[SchemaFragment] | SchemaFragment | None" = Field(default=None, alias="not")

    @field_validator("properties", mode="before")
    @classmethod
    def _stringify_property_names(cls, value):
        # YAML reads unquoted keys such as `on` or `200` as bool or int.
        if isinstance(value, dict):
            return {str(key): child for key, child in value.items()}
        return value

    @field_validator("required", mode="before")
    @classmethod
    def _stringify_required_names(cls, value):
        if isinstance(value, list):
            return [str(name) for name in value]
        return value

    def combination_keys(self) -> list[str]:
        """Return the combination keys present on this fragment, in scan order."""
        values = (self.all_of, self.any_of, self.one_of, self.not_)
        return [key for key, value in zip(COMBINATION_KEYS, values) if value is not None]

    def is_required(self, property_name: str) -> bool:
        return property_name in (self.required or [])
