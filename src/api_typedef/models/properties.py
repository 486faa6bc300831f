"""Type definition tree handed to documentation renderers.

Every node is a property discriminated by ``kind``:

- ``primitive``: a plain value (also used for arrays, see ``is_array``)
- ``enum``: a value restricted to ``enum`` literals
- ``combination``: allOf / anyOf / oneOf / not over member types
- ``object``: a nested object, optionally with child ``properties``
- ``indexer``: a map whose values share one type, exposed as a ``[]`` child
"""

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .property_types import CombinationType, PropertyType


def render_example(value: Any) -> str | None:
    """Convert a schema example into display text."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=4, default=str)
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return str(value)


class PropertyBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str | None = None
    type: PropertyType
    example: str | None = None
    example_format: str = "json"  # syntax highlight hint: json / xml / plain
    required: bool = False
    is_array: bool = False

    @model_validator(mode="after")
    def _check_kind_matches_type(self):
        if (self.kind == "combination") != isinstance(self.type, CombinationType):
            raise ValueError(f"Property kind '{self.kind}' does not match type '{self.type.display_as}'")
        return self


class PrimitiveProperty(PropertyBase):
    kind: Literal["primitive"] = "primitive"


class EnumProperty(PropertyBase):
    kind: Literal["enum"] = "enum"
    enum: list[Any] = []
    # Set when an object fragment declares both enum and properties.
    properties: list["Property"] | None = None


class CombinationProperty(PropertyBase):
    kind: Literal["combination"] = "combination"
    type: CombinationType


class ObjectProperty(PropertyBase):
    kind: Literal["object"] = "object"
    properties: list["Property"] | None = None


class IndexerProperty(PropertyBase):
    kind: Literal["indexer"] = "indexer"
    properties: list["Property"] | None = None


Property = Annotated[
    Union[PrimitiveProperty, EnumProperty, CombinationProperty, ObjectProperty, IndexerProperty],
    Field(discriminator="kind"),
]

for _model in (EnumProperty, ObjectProperty, IndexerProperty):
    _model.model_rebuild()


class TypeDefinition(ObjectProperty):
    """Root of a type definition tree, named by the caller."""

    kind: Literal["object", "enum", "indexer"] = "object"
    enum: list[Any] | None = None

    @property
    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name
