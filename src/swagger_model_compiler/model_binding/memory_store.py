"""In-memory model store."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from datetime import date
from typing import Any

from swagger_model_compiler.schema_resolution.resolved_schemas import (
    ResolvedField,
    ResolvedSchema,
    StorageType,
)


class ModelStoreError(Exception):
    """Raised for collection creation or document validation failures."""


class InMemoryCollection:
    """Named, queryable collection of documents shaped by one schema."""

    def __init__(self, name: str, schema: ResolvedSchema) -> None:
        self.name = name
        self.schema = schema
        self._documents: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._documents)

    def insert_one(self, document: Mapping[str, Any]) -> dict[str, Any]:
        """Validate and store a copy of ``document``."""
        validate_document(self.schema, document, path=self.name)
        stored = copy.deepcopy(dict(document))
        self._documents.append(stored)
        return copy.deepcopy(stored)

    def find(self, **criteria: Any) -> list[dict[str, Any]]:
        """Return copies of documents whose top-level fields equal ``criteria``."""
        unknown = [key for key in criteria if key not in self.schema.fields]
        if unknown:
            raise ModelStoreError(f"Unknown fields for collection '{self.name}': {unknown}")
        return [
            copy.deepcopy(document)
            for document in self._documents
            if all(document.get(key) == value for key, value in criteria.items())
        ]


class InMemoryModelStore:
    """Store handing out :class:`InMemoryCollection` handles."""

    kind = "memory"

    def __init__(self) -> None:
        self._collections: dict[str, InMemoryCollection] = {}

    @property
    def collections(self) -> Mapping[str, InMemoryCollection]:
        return dict(self._collections)

    def create_collection(self, name: str, schema: ResolvedSchema) -> InMemoryCollection:
        if name in self._collections:
            raise ModelStoreError(f"Collection '{name}' already exists.")
        collection = InMemoryCollection(name, schema)
        self._collections[name] = collection
        return collection


def validate_document(schema: ResolvedSchema, document: Any, *, path: str) -> None:
    """Raise :class:`ModelStoreError` unless ``document`` fits ``schema``."""
    if schema.storage_type is not None:
        _validate_value(schema.storage_type, document, path)
        return
    if not isinstance(document, Mapping):
        raise ModelStoreError(f"{path} must be a mapping.")
    for key, value in document.items():
        resolved_field = schema.fields.get(key)
        if resolved_field is None:
            raise ModelStoreError(f"{path}.{key} is not defined by schema '{schema.name}'.")
        if value is None:
            continue
        _validate_field(resolved_field, value, f"{path}.{key}")


def _validate_field(resolved_field: ResolvedField, value: Any, path: str) -> None:
    if resolved_field.is_array:
        if not isinstance(value, (list, tuple)):
            raise ModelStoreError(f"{path} must be a list.")
        for index, item in enumerate(value):
            _validate_single(resolved_field.target, item, f"{path}[{index}]")
        return
    _validate_single(resolved_field.target, value, path)


def _validate_single(target: StorageType | ResolvedSchema, value: Any, path: str) -> None:
    if isinstance(target, ResolvedSchema):
        validate_document(target, value, path=path)
        return
    _validate_value(target, value, path)


def _validate_value(storage_type: StorageType, value: Any, path: str) -> None:
    if storage_type is StorageType.NUMERIC:
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif storage_type is StorageType.TEXT:
        valid = isinstance(value, str)
    elif storage_type is StorageType.BOOLEAN:
        valid = isinstance(value, bool)
    else:
        valid = isinstance(value, date)
    if not valid:
        raise ModelStoreError(f"{path} must be a {storage_type.value} value.")
