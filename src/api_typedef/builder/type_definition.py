"""Entry point: builds the named root of a type definition tree."""

from collections.abc import Mapping
from typing import Any

from api_typedef.contract.schema import SchemaFragment
from api_typedef.models.properties import TypeDefinition

from .diagnostics import BuildDiagnostics
from .tree import build_object_property


def build_type_definition(
    name: str,
    fragment: SchemaFragment | Mapping[str, Any],
    diagnostics: BuildDiagnostics | None = None,
) -> TypeDefinition:
    """Build the type definition tree for ``fragment`` under the given name.

    The name always wins over any ``title`` on the fragment. Properties that
    cannot be built are left out and reported to ``diagnostics``.

    Raises:
        pydantic.ValidationError: The root fragment is malformed.
        SchemaStructureError: A combination uses a single-schema ``not``.
    """
    if not isinstance(fragment, SchemaFragment):
        fragment = SchemaFragment.model_validate(fragment)

    root = build_object_property(name, fragment, required=True, diagnostics=diagnostics, path=name)
    return TypeDefinition(**{**dict(root), "name": name})
