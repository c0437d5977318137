"""Compilation use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from swagger_model_compiler.configuration import (
    BindingSettings,
    ConfigurationError,
    load_configuration,
)
from swagger_model_compiler.definition_ingestion import (
    DocumentFormatError,
    SwaggerDocument,
    load_swagger_document,
)
from swagger_model_compiler.model_binding import (
    ExtensionLoadError,
    FilesystemExtensionLoader,
    InMemoryModelStore,
    ModelStore,
    ModelStoreError,
    bind_models,
)
from swagger_model_compiler.schema_resolution import resolve_all

from .compile_contracts import CompilationOutcome, CompileRequest

_LOGGER = logging.getLogger(__name__)


class CompilationError(Exception):
    """Raised when a swagger document cannot be compiled into schemas or models."""


def compile_specification(request: CompileRequest) -> CompilationOutcome:
    """Resolve all definitions and bind the models the document declares."""
    if request.specification is None:
        raise ConfigurationError("Swagger spec not supplied")

    document = (
        request.specification
        if isinstance(request.specification, SwaggerDocument)
        else load_swagger_document(request.specification)
    )

    resolution = resolve_all(document.definitions)
    if resolution.error is not None:
        raise CompilationError(str(resolution.error)) from resolution.error
    _LOGGER.info("Resolved %d schemas", len(resolution.schemas))

    persistence = document.persistence
    if persistence is None or not persistence.bindings:
        return CompilationOutcome(schemas=resolution.schemas)

    if request.store is None:
        raise ConfigurationError(
            "A model store is required when x-persistence models are declared"
        )
    if persistence.store_type is not None and persistence.store_type != request.store.kind:
        _LOGGER.warning(
            "Skipping model binding: x-persistence type `%s` does not match store `%s`",
            persistence.store_type,
            request.store.kind,
        )
        return CompilationOutcome(schemas=resolution.schemas)
    try:
        binding = bind_models(
            resolution.schemas,
            persistence.bindings,
            store=request.store,
            extension_loader=request.extension_loader,
        )
    except (ExtensionLoadError, ModelStoreError) as exc:
        raise CompilationError(str(exc)) from exc
    return CompilationOutcome(schemas=binding.schemas, models=binding.models)


def compile_configured_specification(config_path: Path | str) -> CompilationOutcome:
    """Compile the swagger document named by a configuration file."""
    try:
        configuration = load_configuration(config_path)
        document = load_swagger_document(configuration.specification.text)
    except DocumentFormatError as exc:
        raise CompilationError(str(exc)) from exc

    return compile_specification(
        CompileRequest(
            specification=document,
            store=build_model_store(configuration.binding),
            extension_loader=_build_extension_loader(configuration.binding),
        )
    )


def build_model_store(settings: BindingSettings) -> ModelStore:
    """Create the backing store named by the binding settings."""
    if settings.store == "memory":
        return InMemoryModelStore()
    raise ConfigurationError(f"Unsupported model store: {settings.store}")


def _build_extension_loader(settings: BindingSettings) -> FilesystemExtensionLoader | None:
    if settings.extensions_path is None:
        return None
    return FilesystemExtensionLoader(settings.extensions_path)
