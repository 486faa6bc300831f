import pytest
from pydantic import ValidationError

from api_typedef.builder.diagnostics import BuildDiagnostics
from api_typedef.builder.type_definition import build_type_definition
from api_typedef.contract.schema import SchemaFragment
from api_typedef.models.properties import TypeDefinition
from api_typedef.models.property_types import (
    ArrayOfPrimitiveType,
    ArrayOfReferenceType,
    CombinationKind,
    PrimitiveType,
    ReferenceType,
)

PET = {
    "title": "Animal",
    "type": "object",
    "required": ["id", "name"],
    "properties": {
        "id": {"type": "integer", "format": "int64"},
        "name": {"type": "string", "example": "doggie"},
        "category": {"$ref": "#/components/schemas/Category"},
        "owner": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "address": {"type": "object", "properties": {"city": {"type": "string"}}},
            },
        },
        "tags": {"type": "array", "items": {"$ref": "#/components/schemas/Tag"}},
        "photoUrls": {"type": "array", "items": {"type": "string"}},
        "adoption": {"oneOf": [{"$ref": "#/components/schemas/Adopted"}, {"type": "string"}]},
    },
}


class TestBuildTypeDefinition:
    def test_name_overrides_title(self):
        td = build_type_definition("Pet", PET)
        assert isinstance(td, TypeDefinition)
        assert td.name == "Pet"
        assert str(td) == "Pet"
        assert td.kind == "object"
        assert td.required is True

    def test_tree_shape(self):
        td = build_type_definition("Pet", PET)
        props = {p.name: p for p in td.properties}
        assert list(props) == [
            "id",
            "name",
            "category",
            "owner.name",
            "owner.address.city",
            "tags",
            "photoUrls",
            "adoption",
        ]
        assert props["id"].type == PrimitiveType(name="int64")
        assert props["id"].required is True
        assert props["name"].example == "doggie"
        assert props["category"].type == ReferenceType(name="Category")
        assert props["tags"].type == ArrayOfReferenceType(name="Tag")
        assert props["photoUrls"].type == ArrayOfPrimitiveType(name="string")
        assert props["adoption"].type.combination_kind == CombinationKind.ONE_OF

    def test_accepts_fragment_model(self):
        td = build_type_definition("Pet", SchemaFragment.model_validate(PET))
        assert td == build_type_definition("Pet", PET)

    def test_building_twice_is_deep_equal(self):
        first = build_type_definition("Pet", PET)
        second = build_type_definition("Pet", PET)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_string_root_is_leaf(self):
        td = build_type_definition("Name", {"type": "string"})
        assert td.kind == "object"
        assert td.type == PrimitiveType(name="string")
        assert td.properties is None

    def test_indexer_root(self):
        td = build_type_definition("Labels", {"type": "object", "items": {"type": "string"}})
        assert td.kind == "indexer"
        assert td.properties[0].name == "[]"

    def test_enum_root(self):
        td = build_type_definition("Status", {"type": "string", "enum": ["on", "off"]})
        assert td.kind == "enum"
        assert td.enum == ["on", "off"]

    def test_reference_root(self):
        td = build_type_definition("Alias", {"$ref": "#/components/schemas/Pet"})
        assert td.type == ReferenceType(name="Pet")
        assert td.name == "Alias"

    def test_reports_to_given_diagnostics(self):
        diagnostics = BuildDiagnostics()
        td = build_type_definition(
            "Upload",
            {"properties": {"content": {"type": "file"}, "size": {"type": "integer"}}},
            diagnostics=diagnostics,
        )
        assert [p.name for p in td.properties] == ["size"]
        assert [issue.path for issue in diagnostics.issues] == ["Upload.content"]

    def test_malformed_root_raises(self):
        with pytest.raises(ValidationError):
            build_type_definition("Bad", {"properties": ["a", "b"]})
