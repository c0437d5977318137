"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import BindingSettings, Configuration, SpecificationConfig

SUPPORTED_STORES: tuple[str, ...] = ("memory",)


class ConfigurationError(Exception):
    """Raised when the configuration is invalid or incomplete."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = _read_utf8(path, "Configuration file")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    specification = _parse_specification_section(parsed.get("specification"), path.parent)
    binding = _parse_binding_section(parsed.get("binding"), path.parent)

    return Configuration(path=path, specification=specification, binding=binding)


def _parse_specification_section(value: Any, base_path: Path) -> SpecificationConfig:
    if isinstance(value, str):
        section: Mapping[str, Any] = {"path": value}
    else:
        section = _require_mapping(value, "specification")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Specification must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Specification inline value must be a string.")
        return SpecificationConfig(text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Specification path must be a string.")
        document_path = _resolve_path(base_path, path_value)
        if not document_path.exists():
            raise ConfigurationError(f"Swagger document not found: {document_path}")
        text = _read_utf8(document_path, "Swagger document")
        if not text.strip():
            raise ConfigurationError("Swagger document cannot be empty.")
        return SpecificationConfig(text=text, source_path=document_path)
    raise ConfigurationError("Specification requires either inline or path.")


def _parse_binding_section(value: Any, base_path: Path) -> BindingSettings:
    section = {} if value is None else _require_mapping(value, "binding")
    store = _require_non_empty_string(section.get("store", "memory"), "binding.store").lower()
    if store not in SUPPORTED_STORES:
        raise ConfigurationError(
            f"binding.store '{store}' is not supported (expected one of: "
            f"{', '.join(SUPPORTED_STORES)})."
        )

    extensions_value = section.get("extensions_path")
    extensions_path = None
    if extensions_value is not None:
        raw_path = _require_non_empty_string(extensions_value, "binding.extensions_path")
        extensions_path = _resolve_path(base_path, raw_path)
        if not extensions_path.is_dir():
            raise ConfigurationError(f"Extensions directory not found: {extensions_path}")

    return BindingSettings(store=store, extensions_path=extensions_path)


def _read_utf8(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"{label} is not valid UTF-8: {path}") from exc


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
