"""Collapses a nested object property into dotted leaf properties."""

from api_typedef.models.properties import Property


def flatten_nested_object(nested: Property, prefix: str) -> list[Property]:
    """Return the leaves of ``nested`` renamed to ``prefix.child``.

    Object children with their own properties are descended into with their
    name appended to the prefix. Bare references and free-form objects are
    leaves instead of being descended into, which would drop them. Leaves
    are copied, the input tree is left untouched.
    """
    result: list[Property] = []

    for prop in getattr(nested, "properties", None) or []:
        if prop.kind == "object" and prop.properties is not None:
            result.extend(flatten_nested_object(prop, f"{prefix}.{prop.name}"))
        else:
            result.append(prop.model_copy(update={"name": f"{prefix}.{prop.name}"}))

    return result
