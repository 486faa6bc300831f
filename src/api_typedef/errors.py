"""Exceptions raised while building type definitions."""


class TypeDefinitionError(Exception):
    """Base exception for type definition errors."""


class PropertyBuildError(TypeDefinitionError):
    """A single property could not be built; the property is skipped."""


class UnknownSchemaTypeError(PropertyBuildError):
    """A property declares a type outside the known set."""

    def __init__(self, schema_type: str | None):
        super().__init__(f"Unknown type of schema definition: {schema_type}")
        self.schema_type = schema_type


class SchemaStructureError(TypeDefinitionError):
    """A fragment violates the shape of the schema contract. Aborts the build."""


class ContractError(TypeDefinitionError):
    """An API document could not be read or does not contain the schema."""
