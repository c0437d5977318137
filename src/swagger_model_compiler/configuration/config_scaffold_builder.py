"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "compiler.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for swagger-model-compiler.
# Replace every <REQUIRED> placeholder before running compile or export-schemas.
# Remove <OPTIONAL> entries your setup does not need.

specification:
  # Provide either a swagger document path (JSON or YAML) or inline document text.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

binding:
  # Backing store for collections declared under x-persistence.models (memory).
  store: memory
  # Directory holding behaviour extensions named in x-persistence.models.<name>.plugins.
  # extensions_path: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
