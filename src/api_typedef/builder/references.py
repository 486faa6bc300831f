"""Helpers for ``$ref`` pointers."""


def type_name_from_ref(ref: str | None) -> str | None:
    """Return the symbolic type name a ``$ref`` points to.

    ``"#/components/schemas/Pet"`` -> ``"Pet"``. The target is never resolved.
    """
    if not ref:
        return None
    return ref.split("/")[-1]
