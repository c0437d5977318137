"""Model binding service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from swagger_model_compiler.definition_ingestion.definition_models import BindingSpec
from swagger_model_compiler.schema_resolution.resolved_schemas import ResolvedSchema

from .binding_contracts import BindingResult, ExtensionLoader, ModelStore
from .extension_loading import ExtensionLoadError

_LOGGER = logging.getLogger(__name__)


def bind_models(
    schemas: Mapping[str, ResolvedSchema],
    bindings: BindingSpec,
    *,
    store: ModelStore,
    extension_loader: ExtensionLoader | None = None,
) -> BindingResult:
    """Create one collection handle per binding entry with a resolved schema."""
    models: dict[str, Any] = {}
    for model_name, entry in bindings.items():
        schema = schemas.get(model_name)
        if schema is None:
            _LOGGER.warning("No schema with name `%s` found", model_name)
            continue

        if entry.extensions:
            if extension_loader is None:
                _LOGGER.warning(
                    "Extensions %s for `%s` ignored: no extension location configured",
                    list(entry.extensions),
                    model_name,
                )
            else:
                for extension_name in entry.extensions:
                    extension = extension_loader.load(extension_name)
                    try:
                        schema.apply_extension(extension_name, extension)
                    except Exception as exc:
                        raise ExtensionLoadError(
                            f"Extension '{extension_name}' failed for `{model_name}`: {exc}"
                        ) from exc

        models[model_name] = store.create_collection(entry.collection_name, schema)
        _LOGGER.info("Bound `%s` to collection `%s`", model_name, entry.collection_name)

    return BindingResult(schemas=schemas, models=models)
