"""Definition set entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

SCALAR_KINDS: frozenset[str] = frozenset(
    {
        "integer",
        "long",
        "float",
        "double",
        "string",
        "byte",
        "binary",
        "password",
        "boolean",
        "date",
        "dateTime",
    }
)


@dataclass(frozen=True)
class ScalarField:
    """Field holding one primitive value."""

    kind: str


@dataclass(frozen=True)
class ScalarArrayField:
    """Field holding an ordered sequence of one primitive kind."""

    kind: str


@dataclass(frozen=True)
class ReferenceField:
    """Field pointing at another named definition."""

    reference: str


@dataclass(frozen=True)
class ReferenceArrayField:
    """Field holding an ordered sequence of a referenced definition."""

    reference: str


Field = ScalarField | ScalarArrayField | ReferenceField | ReferenceArrayField


@dataclass(frozen=True)
class SimpleDefinition:
    """Definition made of a single primitive kind."""

    kind: str


@dataclass(frozen=True)
class CompositeDefinition:
    """Definition made of named fields."""

    fields: Mapping[str, Field] = field(default_factory=lambda: MappingProxyType({}))


Definition = SimpleDefinition | CompositeDefinition

DefinitionSet = Mapping[str, Definition]


@dataclass(frozen=True)
class BindingEntry:
    """Collection requested for one resolved definition."""

    collection_name: str
    extensions: tuple[str, ...] = ()


BindingSpec = Mapping[str, BindingEntry]


@dataclass(frozen=True)
class PersistenceSpec:
    """Persistence section of a swagger document."""

    store_type: str | None
    bindings: BindingSpec


@dataclass(frozen=True)
class SwaggerDocument:
    """Parsed swagger document reduced to what schema compilation needs."""

    definitions: DefinitionSet
    persistence: PersistenceSpec | None = None
