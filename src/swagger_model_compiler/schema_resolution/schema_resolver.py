"""Schema resolution service."""

from __future__ import annotations

import logging
import re

from swagger_model_compiler.definition_ingestion.definition_models import (
    CompositeDefinition,
    Definition,
    DefinitionSet,
    Field,
    ReferenceArrayField,
    ReferenceField,
    ScalarArrayField,
    ScalarField,
    SimpleDefinition,
)

from .resolution_errors import (
    CyclicReferenceError,
    MissingDefinitionError,
    SchemaResolutionError,
    UnsupportedReferenceError,
)
from .resolved_schemas import ResolutionResult, ResolvedField, ResolvedSchema
from .scalar_type_mapper import map_scalar

_LOGGER = logging.getLogger(__name__)

# External references are not supported.
_LOCAL_REFERENCE = re.compile(r"#/definitions/(\w*)", re.ASCII)

RESERVED_NAME_FRAGMENT = "Error"


def resolve_all(definitions: DefinitionSet) -> ResolutionResult:
    """Resolve every definition of the set in one run."""
    resolver = SchemaResolver(definitions)
    try:
        schemas = resolver.run()
    except SchemaResolutionError as exc:
        _LOGGER.debug("Schema resolution aborted: %s", exc)
        return ResolutionResult(schemas={}, error=exc)
    return ResolutionResult(schemas=schemas)


def parse_reference(reference: str) -> str:
    """Return the definition name a local reference token points at."""
    match = _LOCAL_REFERENCE.fullmatch(reference)
    if match is None:
        raise UnsupportedReferenceError(f"Unsupported schema reference {reference}")
    return match.group(1)


def is_reserved_name(definition_name: str) -> bool:
    return RESERVED_NAME_FRAGMENT in definition_name


class SchemaResolver:
    """Single resolution run over one definition set.

    The cache belongs to this instance; create a new resolver per run.
    """

    def __init__(self, definitions: DefinitionSet) -> None:
        self._definitions = definitions
        self._cache: dict[str, ResolvedSchema] = {}
        self._in_progress: list[str] = []

    def run(self) -> dict[str, ResolvedSchema]:
        """Resolve all definitions in set order, raising the first error."""
        for definition_name, definition in self._definitions.items():
            if definition_name in self._cache:
                continue
            if is_reserved_name(definition_name):
                _LOGGER.debug("Skipping reserved definition %s", definition_name)
                continue
            self._cache[definition_name] = self.resolve_definition(definition_name, definition)
        # Reserved definitions may be cached while nested in others; they are never returned.
        return {
            name: schema for name, schema in self._cache.items() if not is_reserved_name(name)
        }

    def resolve_definition(self, definition_name: str, definition: Definition) -> ResolvedSchema:
        """Resolve one definition, resolving referenced definitions first."""
        if isinstance(definition, SimpleDefinition):
            return ResolvedSchema(name=definition_name, storage_type=map_scalar(definition.kind))
        if not isinstance(definition, CompositeDefinition):
            raise TypeError(f"Unsupported definition value for '{definition_name}'.")

        self._in_progress.append(definition_name)
        try:
            fields = {
                field_name: self._resolve_field(field)
                for field_name, field in definition.fields.items()
            }
        finally:
            self._in_progress.pop()
        _LOGGER.debug("Resolved definition %s with %d fields", definition_name, len(fields))
        return ResolvedSchema(name=definition_name, fields=fields)

    def _resolve_field(self, field: Field) -> ResolvedField:
        if isinstance(field, ScalarField):
            return ResolvedField(target=map_scalar(field.kind))
        if isinstance(field, ScalarArrayField):
            return ResolvedField(target=map_scalar(field.kind), is_array=True)
        if isinstance(field, ReferenceField):
            return ResolvedField(target=self._resolve_reference(field.reference))
        if isinstance(field, ReferenceArrayField):
            return ResolvedField(target=self._resolve_reference(field.reference), is_array=True)
        raise TypeError(f"Unsupported field value: {field!r}")

    def _resolve_reference(self, reference: str) -> ResolvedSchema:
        referenced_name = parse_reference(reference)

        cached = self._cache.get(referenced_name)
        if cached is not None:
            return cached

        if referenced_name in self._in_progress:
            chain = " -> ".join(
                self._in_progress[self._in_progress.index(referenced_name) :] + [referenced_name]
            )
            raise CyclicReferenceError(f"Cyclic schema reference: {chain}")

        definition = self._definitions.get(referenced_name)
        if definition is None:
            raise MissingDefinitionError(f"Missing schema definition for {referenced_name}")

        schema = self.resolve_definition(referenced_name, definition)
        self._cache[referenced_name] = schema
        return schema
