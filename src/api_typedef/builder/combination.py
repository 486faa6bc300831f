"""Builds properties for allOf / anyOf / oneOf / not fragments."""

from api_typedef.contract.schema import SchemaFragment
from api_typedef.errors import SchemaStructureError
from api_typedef.models.properties import CombinationProperty, render_example
from api_typedef.models.property_types import CombinationKind, CombinationType, PrimitiveType, ReferenceType

from .references import type_name_from_ref


def select_combination(fragment: SchemaFragment) -> tuple[CombinationKind, list[SchemaFragment]]:
    """Pick the combination kind and its members.

    Keys are checked in the order allOf, anyOf, oneOf, not and a later key
    overrides an earlier one, so ``not`` wins whenever it is present.
    """
    kind = None
    members = None

    if fragment.all_of is not None:
        kind, members = CombinationKind.ALL_OF, fragment.all_of

    if fragment.any_of is not None:
        kind, members = CombinationKind.ANY_OF, fragment.any_of

    if fragment.one_of is not None:
        kind, members = CombinationKind.ONE_OF, fragment.one_of

    if fragment.not_ is not None:
        if isinstance(fragment.not_, SchemaFragment):
            # Only the list form of "not" is supported.
            raise SchemaStructureError("'not' must be a list of schemas; a single schema is not supported")
        kind, members = CombinationKind.NOT, fragment.not_

    if kind is None:
        raise SchemaStructureError("Fragment has no allOf/anyOf/oneOf/not to combine")

    return kind, members


def build_combination_property(name: str, fragment: SchemaFragment, *, required: bool) -> CombinationProperty:
    kind, members = select_combination(fragment)

    member_types = []
    for member in members:
        if member.ref:
            member_types.append(ReferenceType(name=type_name_from_ref(member.ref)))
        else:
            member_types.append(PrimitiveType(name=member.type or "object"))

    return CombinationProperty(
        name=fragment.title or name,
        description=fragment.description,
        type=CombinationType(combination_kind=kind, members=member_types),
        example=render_example(fragment.example),
        required=required,
        is_array=False,
    )
