"""Swagger document reader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from swagger_model_compiler.definition_ingestion import (
    BindingEntry,
    CompositeDefinition,
    DocumentFormatError,
    ReferenceArrayField,
    ReferenceField,
    ScalarArrayField,
    ScalarField,
    SimpleDefinition,
    load_swagger_document,
    read_swagger_document,
)

_PET_STORE = {
    "swagger": "2.0",
    "definitions": {
        "Pet": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "owner": {"$ref": "#/definitions/Owner"},
                "visits": {"type": "array", "items": {"$ref": "#/definitions/Visit"}},
            },
        },
        "Owner": {"properties": {"id": {"type": "integer"}}},
        "Visit": {"properties": {"at": {"type": "dateTime"}}},
        "PetId": {"type": "long"},
    },
    "x-persistence": {
        "type": "mongoose",
        "models": {
            "Pet": {"plugins": ["timestamps"]},
            "Owner": {"collection": "owners"},
        },
    },
}


def test_builds_tagged_fields_from_mapping() -> None:
    document = load_swagger_document(_PET_STORE)

    pet = document.definitions["Pet"]
    assert isinstance(pet, CompositeDefinition)
    assert pet.fields["name"] == ScalarField("string")
    assert pet.fields["tags"] == ScalarArrayField("string")
    assert pet.fields["owner"] == ReferenceField("#/definitions/Owner")
    assert pet.fields["visits"] == ReferenceArrayField("#/definitions/Visit")
    assert document.definitions["PetId"] == SimpleDefinition("long")


def test_preserves_definition_order() -> None:
    document = load_swagger_document(_PET_STORE)

    assert list(document.definitions) == ["Pet", "Owner", "Visit", "PetId"]


def test_parses_persistence_bindings() -> None:
    document = load_swagger_document(_PET_STORE)

    assert document.persistence is not None
    assert document.persistence.store_type == "mongoose"
    assert document.persistence.bindings["Pet"] == BindingEntry("Pet", ("timestamps",))
    assert document.persistence.bindings["Owner"] == BindingEntry("owners", ())


def test_document_without_persistence_has_no_bindings() -> None:
    document = load_swagger_document({"definitions": {}})

    assert document.persistence is None
    assert dict(document.definitions) == {}


def test_accepts_json_text_and_bytes() -> None:
    text = json.dumps(_PET_STORE)

    from_text = load_swagger_document(text)
    from_bytes = load_swagger_document(text.encode("utf-8"))

    assert list(from_text.definitions) == list(from_bytes.definitions)


def test_accepts_yaml_text() -> None:
    document = load_swagger_document(
        """
definitions:
  Owner:
    properties:
      id:
        type: integer
"""
    )

    assert document.definitions["Owner"].fields["id"] == ScalarField("integer")


def test_reads_document_from_file(tmp_path: Path) -> None:
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps(_PET_STORE), encoding="utf-8")

    document = read_swagger_document(path)

    assert "Pet" in document.definitions


def test_missing_file_raises_document_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentFormatError, match="not found"):
        read_swagger_document(tmp_path / "missing.yaml")


def test_object_definition_without_properties_is_empty_composite() -> None:
    document = load_swagger_document({"definitions": {"Empty": {"type": "object"}}})

    assert document.definitions["Empty"] == CompositeDefinition()


def test_unknown_field_type_is_kept_for_the_mapper() -> None:
    document = load_swagger_document(
        {"definitions": {"Pet": {"properties": {"weight": {"type": "number"}}}}}
    )

    assert document.definitions["Pet"].fields["weight"] == ScalarField("number")


@pytest.mark.parametrize(
    "data",
    [
        42,
        None,
        "- just\n- a list\n",
        "definitions: [unclosed",
        {"definitions": ["Pet"]},
        {"definitions": {"Pet": "string"}},
        {"definitions": {"Pet": {"properties": {"name": {}}}}},
        {"definitions": {"Pet": {"properties": {"tags": {"type": "array"}}}}},
        {"definitions": {"Pet": {"properties": {"owner": {"$ref": 7}}}}},
        {"definitions": {}, "x-persistence": {"models": {"Pet": {"plugins": "timestamps"}}}},
        {"definitions": {}, "x-persistence": {"models": {"Pet": {"collection": " "}}}},
    ],
)
def test_rejects_malformed_documents(data) -> None:
    with pytest.raises(DocumentFormatError):
        load_swagger_document(data)
