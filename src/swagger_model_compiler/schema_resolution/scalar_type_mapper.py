"""Primitive kind to storage type mapping."""

from __future__ import annotations

from .resolution_errors import UnrecognizedSchemaTypeError
from .resolved_schemas import StorageType

_STORAGE_TYPE_BY_KIND: dict[str, StorageType] = {
    "integer": StorageType.NUMERIC,
    "long": StorageType.NUMERIC,
    "float": StorageType.NUMERIC,
    "double": StorageType.NUMERIC,
    "string": StorageType.TEXT,
    "password": StorageType.TEXT,
    "byte": StorageType.TEXT,
    "binary": StorageType.TEXT,
    "boolean": StorageType.BOOLEAN,
    "date": StorageType.TIMESTAMP,
    "dateTime": StorageType.TIMESTAMP,
}


def map_scalar(kind: str) -> StorageType:
    """Return the storage type for a primitive kind."""
    try:
        return _STORAGE_TYPE_BY_KIND[kind]
    except (KeyError, TypeError) as exc:
        raise UnrecognizedSchemaTypeError(f"Unrecognized schema type: {kind}") from exc
