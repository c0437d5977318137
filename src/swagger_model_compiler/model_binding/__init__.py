"""Model binding exports."""

from .binding_contracts import BindingResult, Extension, ExtensionLoader, ModelStore
from .extension_loading import EXTENSION_ENTRYPOINT, ExtensionLoadError, FilesystemExtensionLoader
from .memory_store import InMemoryCollection, InMemoryModelStore, ModelStoreError, validate_document
from .model_binder import bind_models

__all__ = [
    "EXTENSION_ENTRYPOINT",
    "BindingResult",
    "Extension",
    "ExtensionLoadError",
    "ExtensionLoader",
    "FilesystemExtensionLoader",
    "InMemoryCollection",
    "InMemoryModelStore",
    "ModelStore",
    "ModelStoreError",
    "bind_models",
    "validate_document",
]
