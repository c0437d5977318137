"""Schema resolution exports."""

from .resolution_errors import (
    CyclicReferenceError,
    MissingDefinitionError,
    SchemaResolutionError,
    UnrecognizedSchemaTypeError,
    UnsupportedReferenceError,
)
from .resolved_schemas import ResolutionResult, ResolvedField, ResolvedSchema, StorageType
from .scalar_type_mapper import map_scalar
from .schema_resolver import SchemaResolver, parse_reference, resolve_all

__all__ = [
    "CyclicReferenceError",
    "MissingDefinitionError",
    "ResolutionResult",
    "ResolvedField",
    "ResolvedSchema",
    "SchemaResolutionError",
    "SchemaResolver",
    "StorageType",
    "UnrecognizedSchemaTypeError",
    "UnsupportedReferenceError",
    "map_scalar",
    "parse_reference",
    "resolve_all",
]
