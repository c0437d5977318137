"""Plain-data rendering of resolved schemas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from swagger_model_compiler.schema_resolution.resolved_schemas import (
    ResolvedField,
    ResolvedSchema,
)


def describe_schemas(schemas: Mapping[str, ResolvedSchema]) -> dict[str, Any]:
    """Return a JSON-ready description keyed by definition name."""
    return {name: describe_schema(schema) for name, schema in schemas.items()}


def describe_schema(schema: ResolvedSchema) -> dict[str, Any]:
    """Describe one schema; nested schemas are referenced by name."""
    description: dict[str, Any]
    if schema.storage_type is not None:
        description = {"type": schema.storage_type.value}
    else:
        description = {
            "fields": {
                field_name: describe_field(resolved_field)
                for field_name, resolved_field in schema.fields.items()
            }
        }
    if schema.applied_extensions:
        description["extensions"] = list(schema.applied_extensions)
    return description


def describe_field(resolved_field: ResolvedField) -> dict[str, Any]:
    target = resolved_field.target
    if isinstance(target, ResolvedSchema):
        description: dict[str, Any] = {"schema": target.name}
    else:
        description = {"type": target.value}
    if resolved_field.is_array:
        description["array"] = True
    return description
