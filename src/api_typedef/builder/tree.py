"""Turns schema fragments into type definition properties.

An object fragment is classified by the first matching cue: ``$ref``
(reference), ``items`` (indexer), then ``enum`` and ``properties``.
Declared properties are dispatched on their effective type. Nested
objects of a top-level build are flattened into dotted leaves. Inside
nested builds (array elements, nested objects) one level of grouping is
kept.
"""

import logging

from pydantic import ValidationError

from api_typedef.contract.schema import SchemaFragment
from api_typedef.errors import PropertyBuildError, UnknownSchemaTypeError
from api_typedef.models.properties import (
    EnumProperty,
    IndexerProperty,
    ObjectProperty,
    PrimitiveProperty,
    Property,
    render_example,
)
from api_typedef.models.property_types import (
    ArrayOfPrimitiveType,
    ArrayOfReferenceType,
    PrimitiveType,
    ReferenceType,
)

from .combination import build_combination_property
from .diagnostics import BuildDiagnostics
from .flattener import flatten_nested_object
from .references import type_name_from_ref

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = ("integer", "number", "string", "boolean")
INDEXER_NAME = "[]"


def effective_type(fragment: SchemaFragment) -> str | None:
    """Return the type a declared property is dispatched on.

    Later cues win: a ``$ref`` makes it an object, ``items`` an array and
    any combination key a combination. The fragment itself is not changed.
    """
    schema_type = fragment.type
    if schema_type is None and fragment.properties is not None:
        schema_type = "object"
    if fragment.ref:
        schema_type = "object"
    if fragment.items is not None:
        schema_type = "array"
    if fragment.combination_keys():
        schema_type = "combination"
    return schema_type


def _common_fields(name: str, fragment: SchemaFragment, *, required: bool, is_array: bool) -> dict:
    return {
        "name": fragment.title or name,
        "description": fragment.description,
        "type": PrimitiveType(name=fragment.format or fragment.type or "object"),
        "example": render_example(fragment.example),
        "required": required,
        "is_array": is_array,
    }


def build_object_property(
    name: str,
    fragment: SchemaFragment,
    *,
    required: bool,
    is_array: bool = False,
    nested: bool = False,
    diagnostics: BuildDiagnostics | None = None,
    path: str | None = None,
) -> Property:
    """Build an object-like property (object, enum or indexer) from ``fragment``.

    Args:
        name: Property name, overridden by the fragment's ``title``.
        required: Whether the parent lists this property as required.
        is_array: Whether the property is the element of an array.
        nested: Keep nested objects grouped instead of flattening them.
        diagnostics: Receives every child that had to be skipped.
        path: Dotted location used in diagnostics, defaults to ``name``.
    """
    if diagnostics is None:
        diagnostics = BuildDiagnostics()
    path = path or name
    fields = _common_fields(name, fragment, required=required, is_array=is_array)

    if fragment.ref:
        fields["type"] = ReferenceType(name=type_name_from_ref(fragment.ref))
        logger.debug("%s references %s", path, fields["type"].name)
        return ObjectProperty(**fields)

    if fragment.items is not None:
        return IndexerProperty(**fields, properties=[_build_indexer_slot(fragment.items)])

    properties = None
    if fragment.properties is not None:
        properties = _build_children(fragment, nested=nested, diagnostics=diagnostics, path=path)

    if fragment.enum is not None:
        return EnumProperty(**fields, enum=fragment.enum, properties=properties)

    return ObjectProperty(**fields, properties=properties)


def _build_indexer_slot(items: SchemaFragment) -> IndexerProperty:
    """The value slot of a map; present whenever a key is, hence required."""
    slot_type = PrimitiveType(name="object")

    if items.type:
        slot_type = PrimitiveType(name=items.type)

    if items.ref:
        slot_type = ReferenceType(name=type_name_from_ref(items.ref))

    return IndexerProperty(name=INDEXER_NAME, type=slot_type, required=True)


def _build_children(
    fragment: SchemaFragment, *, nested: bool, diagnostics: BuildDiagnostics, path: str
) -> list[Property]:
    props: list[Property] = []

    for property_name, raw_child in fragment.properties.items():
        if raw_child is None:
            continue

        child_path = f"{path}.{property_name}"
        try:
            child = SchemaFragment.model_validate(raw_child)
            props.extend(
                _build_child(
                    property_name,
                    child,
                    required=fragment.is_required(property_name),
                    nested=nested,
                    diagnostics=diagnostics,
                    path=child_path,
                )
            )
        except (PropertyBuildError, ValidationError) as e:
            diagnostics.skip(child_path, str(e))

    return props


def _build_child(
    name: str,
    child: SchemaFragment,
    *,
    required: bool,
    nested: bool,
    diagnostics: BuildDiagnostics,
    path: str,
) -> list[Property]:
    """Build one declared property; may yield several flattened leaves."""
    schema_type = effective_type(child)

    if schema_type in PRIMITIVE_TYPES:
        fields = _common_fields(name, child, required=required, is_array=False)
        if child.enum is not None:
            return [EnumProperty(**fields, enum=child.enum)]
        return [PrimitiveProperty(**fields)]

    if schema_type == "object":
        object_property = build_object_property(
            name, child, required=required, nested=True, diagnostics=diagnostics, path=path
        )
        if not nested and object_property.kind == "object" and object_property.properties is not None:
            return flatten_nested_object(object_property, name)
        return [object_property]

    if schema_type == "array":
        return _build_array(name, child, required=required, diagnostics=diagnostics, path=path)

    if schema_type == "combination":
        return [build_combination_property(name, child, required=required)]

    raise UnknownSchemaTypeError(schema_type)


def _build_array(
    name: str, child: SchemaFragment, *, required: bool, diagnostics: BuildDiagnostics, path: str
) -> list[Property]:
    fields = _common_fields(name, child, required=required, is_array=True)
    items = child.items

    if items is None:
        fields["type"] = ArrayOfPrimitiveType(name="object")
        return [PrimitiveProperty(**fields)]

    if items.ref:
        fields["type"] = ArrayOfReferenceType(name=type_name_from_ref(items.ref))
        return [PrimitiveProperty(**fields)]

    if items.type:
        fields["type"] = ArrayOfPrimitiveType(name=items.type)
        return [PrimitiveProperty(**fields)]

    # Element is an inline object: keep its fields grouped under "name[]".
    logger.debug("%s has inline object elements", path)
    element = build_object_property(
        name + "[]",
        items,
        required=required,
        is_array=True,
        nested=True,
        diagnostics=diagnostics,
        path=path + "[]",
    )
    return [element, PrimitiveProperty(**fields)]
