"""Compilation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from swagger_model_compiler.model_binding.binding_contracts import ExtensionLoader, ModelStore
from swagger_model_compiler.schema_resolution.resolved_schemas import ResolvedSchema


@dataclass(frozen=True)
class CompileRequest:
    """Input contract for compiling one swagger document.

    ``specification`` may be a mapping, JSON/YAML text, raw bytes or an
    already loaded ``SwaggerDocument``.
    """

    specification: Any
    store: ModelStore | None = None
    extension_loader: ExtensionLoader | None = None


@dataclass(frozen=True)
class CompilationOutcome:
    """Output contract for one completed compilation."""

    schemas: Mapping[str, ResolvedSchema]
    models: Mapping[str, Any] = field(default_factory=dict)
