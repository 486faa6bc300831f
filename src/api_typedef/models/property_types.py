"""Type variants attached to every type definition property.

Each variant carries a ``display_as`` tag (``displayAs`` when serialized)
that renderers branch on.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CombinationKind(str, Enum):
    ALL_OF = "All of"
    ANY_OF = "Any of"
    ONE_OF = "One of"
    NOT = "Not"


class _TypeVariant(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PrimitiveType(_TypeVariant):
    """e.g. "string", "int32", "object"."""

    display_as: Literal["primitive"] = "primitive"
    name: str


class ReferenceType(_TypeVariant):
    """Named schema referenced through ``$ref``."""

    display_as: Literal["reference"] = "reference"
    name: str


class ArrayOfPrimitiveType(_TypeVariant):
    display_as: Literal["arrayOfPrimitive"] = "arrayOfPrimitive"
    name: str


class ArrayOfReferenceType(_TypeVariant):
    display_as: Literal["arrayOfReference"] = "arrayOfReference"
    name: str


class CombinationType(_TypeVariant):
    """allOf / anyOf / oneOf / not over the member types."""

    display_as: Literal["combination"] = "combination"
    combination_kind: CombinationKind
    members: list["PropertyType"]


PropertyType = Annotated[
    Union[PrimitiveType, ReferenceType, ArrayOfPrimitiveType, ArrayOfReferenceType, CombinationType],
    Field(discriminator="display_as"),
]

CombinationType.model_rebuild()
