"""Swagger document loading service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .definition_models import (
    BindingEntry,
    CompositeDefinition,
    Definition,
    Field,
    PersistenceSpec,
    ReferenceArrayField,
    ReferenceField,
    ScalarArrayField,
    ScalarField,
    SimpleDefinition,
    SwaggerDocument,
)

PERSISTENCE_EXTENSION_KEY = "x-persistence"


class DocumentFormatError(Exception):
    """Raised when a swagger document cannot be reduced to definitions."""


def read_swagger_document(document_path: Path | str) -> SwaggerDocument:
    """Read and parse a swagger document from a JSON or YAML file."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentFormatError(f"Swagger document not found: {path}")
    return load_swagger_document(path.read_bytes())


def load_swagger_document(data: Any) -> SwaggerDocument:
    """Build a swagger document from a mapping, JSON/YAML text or raw bytes."""
    root = _to_plain_mapping(data)

    definitions_value = root.get("definitions") or {}
    if not isinstance(definitions_value, Mapping):
        raise DocumentFormatError("Swagger 'definitions' must be a mapping.")
    definitions = {
        str(name): _parse_definition(str(name), value) for name, value in definitions_value.items()
    }

    return SwaggerDocument(
        definitions=MappingProxyType(definitions),
        persistence=_parse_persistence(root.get(PERSISTENCE_EXTENSION_KEY)),
    )


def _to_plain_mapping(data: Any) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        return data
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentFormatError(f"Swagger document is not valid UTF-8: {exc}") from exc
    if isinstance(data, str):
        try:
            parsed = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise DocumentFormatError(f"Invalid swagger document: {exc}") from exc
        if not isinstance(parsed, Mapping):
            raise DocumentFormatError("Swagger document root must be a mapping.")
        return parsed
    raise DocumentFormatError("Unknown or invalid data object")


def _parse_definition(name: str, value: Any) -> Definition:
    if not isinstance(value, Mapping):
        raise DocumentFormatError(f"Definition '{name}' must be a mapping.")

    properties = value.get("properties")
    if properties is not None:
        if not isinstance(properties, Mapping):
            raise DocumentFormatError(f"Definition '{name}' properties must be a mapping.")
        fields = {
            str(field_name): _parse_field(name, str(field_name), field_value)
            for field_name, field_value in properties.items()
        }
        return CompositeDefinition(fields=MappingProxyType(fields))

    definition_type = value.get("type")
    if isinstance(definition_type, str) and definition_type != "object":
        return SimpleDefinition(kind=definition_type)
    return CompositeDefinition()


def _parse_field(definition_name: str, field_name: str, value: Any) -> Field:
    label = f"{definition_name}.{field_name}"
    if not isinstance(value, Mapping):
        raise DocumentFormatError(f"Field '{label}' must be a mapping.")

    if "$ref" in value:
        return ReferenceField(reference=_require_reference(value["$ref"], label))

    field_type = value.get("type")
    if field_type == "array":
        items = value.get("items")
        if not isinstance(items, Mapping):
            raise DocumentFormatError(f"Array field '{label}' requires an items mapping.")
        if "$ref" in items:
            return ReferenceArrayField(reference=_require_reference(items["$ref"], label))
        item_type = items.get("type")
        if isinstance(item_type, str):
            return ScalarArrayField(kind=item_type)
        raise DocumentFormatError(f"Array field '{label}' items require a type or $ref.")

    if isinstance(field_type, str):
        return ScalarField(kind=field_type)
    raise DocumentFormatError(f"Field '{label}' requires a type or $ref.")


def _require_reference(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise DocumentFormatError(f"Field '{label}' $ref must be a string.")
    return value


def _parse_persistence(value: Any) -> PersistenceSpec | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DocumentFormatError(f"'{PERSISTENCE_EXTENSION_KEY}' must be a mapping.")

    store_type = value.get("type")
    if store_type is not None and not isinstance(store_type, str):
        raise DocumentFormatError(f"{PERSISTENCE_EXTENSION_KEY}.type must be a string.")

    models = value.get("models") or {}
    if not isinstance(models, Mapping):
        raise DocumentFormatError(f"{PERSISTENCE_EXTENSION_KEY}.models must be a mapping.")
    bindings = {
        str(model_name): _parse_binding_entry(str(model_name), model_spec)
        for model_name, model_spec in models.items()
    }
    return PersistenceSpec(store_type=store_type, bindings=MappingProxyType(bindings))


def _parse_binding_entry(model_name: str, value: Any) -> BindingEntry:
    label = f"{PERSISTENCE_EXTENSION_KEY}.models.{model_name}"
    if value is None:
        return BindingEntry(collection_name=model_name)
    if not isinstance(value, Mapping):
        raise DocumentFormatError(f"{label} must be a mapping.")

    collection_name = value.get("collection", model_name)
    if not isinstance(collection_name, str) or not collection_name.strip():
        raise DocumentFormatError(f"{label}.collection must be a non-empty string.")

    extensions = value.get("extensions", value.get("plugins"))
    return BindingEntry(
        collection_name=collection_name.strip(),
        extensions=_normalize_extension_names(extensions, label),
    )


def _normalize_extension_names(value: Any, label: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise DocumentFormatError(f"{label} extensions must be a list of strings.")
    names = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise DocumentFormatError(f"{label} extensions must be non-empty strings.")
        names.append(item.strip())
    return tuple(names)
