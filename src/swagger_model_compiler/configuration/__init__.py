"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import SUPPORTED_STORES, ConfigurationError, load_configuration
from .runtime_settings import BindingSettings, Configuration, SpecificationConfig

__all__ = [
    "BindingSettings",
    "Configuration",
    "SpecificationConfig",
    "ConfigurationError",
    "SUPPORTED_STORES",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
