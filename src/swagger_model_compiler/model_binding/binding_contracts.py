"""Model binding entities and collaborator protocols."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from swagger_model_compiler.schema_resolution.resolved_schemas import ResolvedSchema

Extension = Callable[[ResolvedSchema, Mapping[str, Any]], None]


class ModelStore(Protocol):
    """Backing store able to create named collection handles."""

    kind: str

    def create_collection(self, name: str, schema: ResolvedSchema) -> Any:
        """Create and return a collection handle for ``schema``."""


class ExtensionLoader(Protocol):
    """Source of named behaviour extensions."""

    def load(self, name: str) -> Extension:
        """Return the extension registered under ``name``."""


@dataclass(frozen=True)
class BindingResult:
    """Resolved schemas plus the collection handles created from them."""

    schemas: Mapping[str, ResolvedSchema]
    models: Mapping[str, Any]
