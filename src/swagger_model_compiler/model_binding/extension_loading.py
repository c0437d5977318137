"""Filesystem extension loader."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

from .binding_contracts import Extension

EXTENSION_ENTRYPOINT = "extend"


class ExtensionLoadError(Exception):
    """Raised when a behaviour extension cannot be loaded."""


class FilesystemExtensionLoader:
    """Load extensions from python modules below one directory.

    An extension named ``timestamps`` is either ``<base>/timestamps.py`` or
    the package ``<base>/timestamps/__init__.py`` and must expose a callable
    ``extend(schema, options)``.
    """

    def __init__(self, base_path: Path | str) -> None:
        self._base_path = Path(base_path)
        self._loaded: dict[str, Extension] = {}

    @property
    def base_path(self) -> Path:
        return self._base_path

    def load(self, name: str) -> Extension:
        if name not in self._loaded:
            module = self._import_module(name)
            extension = getattr(module, EXTENSION_ENTRYPOINT, None)
            if not callable(extension):
                raise ExtensionLoadError(
                    f"Extension '{name}' does not define a callable '{EXTENSION_ENTRYPOINT}'."
                )
            self._loaded[name] = extension
        return self._loaded[name]

    def _import_module(self, name: str) -> ModuleType:
        module_path = self._locate(name)
        spec = importlib.util.spec_from_file_location(
            f"swagger_model_compiler_extensions.{name}", module_path
        )
        if spec is None or spec.loader is None:
            raise ExtensionLoadError(f"Cannot import extension '{name}' from {module_path}")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise ExtensionLoadError(f"Failed to import extension '{name}': {exc}") from exc
        return module

    def _locate(self, name: str) -> Path:
        if not name or Path(name).name != name:
            raise ExtensionLoadError(f"Invalid extension name: {name!r}")
        candidates = (
            self._base_path / f"{name}.py",
            self._base_path / name / "__init__.py",
        )
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        raise ExtensionLoadError(f"Extension '{name}' not found in {self._base_path}")
