"""OpenAPI / Swagger document access.

Reads OpenAPI 3.x and Swagger 2.0 documents (YAML or JSON) and builds
type definitions for their named schemas.
"""

from pathlib import Path

import yaml

from api_typedef.builder.diagnostics import BuildDiagnostics
from api_typedef.builder.type_definition import build_type_definition
from api_typedef.errors import ContractError
from api_typedef.models.properties import TypeDefinition


def load_document(file_path: Path) -> dict:
    """Load an OpenAPI/Swagger file. JSON is parsed as YAML."""
    try:
        text = file_path.read_text(encoding="utf-8")
        doc = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as e:
        raise ContractError(f"Unable to read {file_path}: {e}") from e

    if not isinstance(doc, dict):
        raise ContractError(f"{file_path} does not contain an API document")
    return doc


def find_schemas(doc: dict) -> dict[str, dict]:
    """Return the named schemas of a document.

    OpenAPI 3 keeps them under ``components.schemas``, Swagger 2 under
    ``definitions``.
    """
    if "openapi" in doc or "components" in doc:
        components = doc.get("components") or {}
        if not isinstance(components, dict):
            raise ContractError("'components' must be a mapping")
        schemas = components.get("schemas")
    else:
        schemas = doc.get("definitions")

    schemas = schemas or {}
    if not isinstance(schemas, dict):
        raise ContractError("Named schemas must be a mapping of name to schema")
    return dict(schemas)


def build_type_definitions(
    doc: dict,
    names: list[str] | None = None,
    diagnostics: BuildDiagnostics | None = None,
) -> list[TypeDefinition]:
    """Build a type definition per requested schema, or for all of them."""
    schemas = find_schemas(doc)

    if not names:
        names = list(schemas)

    missing = [name for name in names if name not in schemas]
    if missing:
        raise ContractError(f"Schema not found: {', '.join(missing)}")

    return [build_type_definition(name, schemas[name] or {}, diagnostics=diagnostics) for name in names]
