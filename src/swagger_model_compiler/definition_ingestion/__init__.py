"""Definition ingestion exports."""

from .definition_models import (
    SCALAR_KINDS,
    BindingEntry,
    BindingSpec,
    CompositeDefinition,
    Definition,
    DefinitionSet,
    Field,
    PersistenceSpec,
    ReferenceArrayField,
    ReferenceField,
    ScalarArrayField,
    ScalarField,
    SimpleDefinition,
    SwaggerDocument,
)
from .document_reader import DocumentFormatError, load_swagger_document, read_swagger_document

__all__ = [
    "SCALAR_KINDS",
    "BindingEntry",
    "BindingSpec",
    "CompositeDefinition",
    "Definition",
    "DefinitionSet",
    "DocumentFormatError",
    "Field",
    "PersistenceSpec",
    "ReferenceArrayField",
    "ReferenceField",
    "ScalarArrayField",
    "ScalarField",
    "SimpleDefinition",
    "SwaggerDocument",
    "load_swagger_document",
    "read_swagger_document",
]
