"""Resolved schema entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StorageType(str, Enum):
    """Target storage types a primitive kind maps onto."""

    NUMERIC = "numeric"
    TEXT = "text"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class ResolvedField:
    """Resolved type of one schema field."""

    target: StorageType | ResolvedSchema
    is_array: bool = False

    @property
    def is_nested(self) -> bool:
        return isinstance(self.target, ResolvedSchema)


@dataclass(eq=False)
class ResolvedSchema:
    """Store-ready schema for one definition.

    Instances are compared by identity: every field referencing the same
    definition holds the very same ``ResolvedSchema`` object.
    """

    name: str
    storage_type: StorageType | None = None
    fields: dict[str, ResolvedField] = field(default_factory=dict)
    applied_extensions: list[str] = field(default_factory=list)

    @property
    def is_simple(self) -> bool:
        return self.storage_type is not None

    def add_field(self, field_name: str, resolved_field: ResolvedField) -> None:
        """Add a field, typically from a behaviour extension."""
        if self.is_simple:
            raise ValueError(f"Cannot add field '{field_name}' to simple schema '{self.name}'.")
        if field_name in self.fields:
            raise ValueError(f"Schema '{self.name}' already defines field '{field_name}'.")
        self.fields[field_name] = resolved_field

    def apply_extension(
        self,
        extension_name: str,
        extension: Callable[[ResolvedSchema, Mapping[str, Any]], None],
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Run a behaviour extension against this schema and record it."""
        extension(self, dict(options or {}))
        self.applied_extensions.append(extension_name)


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of one resolution run.

    ``schemas`` is empty whenever ``error`` is set.
    """

    schemas: Mapping[str, ResolvedSchema]
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Mapping[str, ResolvedSchema]:
        """Return the schemas or raise the error that ended the run."""
        if self.error is not None:
            raise self.error
        return self.schemas
