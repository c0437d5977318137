"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SpecificationConfig:
    """Normalized swagger document settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class BindingSettings:
    """Backing store and extension settings used when binding models."""

    store: str
    extensions_path: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    specification: SpecificationConfig
    binding: BindingSettings
