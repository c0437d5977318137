"""Filesystem extension loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from swagger_model_compiler.model_binding import ExtensionLoadError, FilesystemExtensionLoader
from swagger_model_compiler.schema_resolution import ResolvedSchema, StorageType

_TIMESTAMPS_EXTENSION = """
from swagger_model_compiler.schema_resolution import ResolvedField, StorageType


def extend(schema, options):
    schema.add_field("created_at", ResolvedField(StorageType.TIMESTAMP))
"""


def test_loads_module_extension(tmp_path: Path) -> None:
    (tmp_path / "timestamps.py").write_text(_TIMESTAMPS_EXTENSION, encoding="utf-8")
    loader = FilesystemExtensionLoader(tmp_path)
    schema = ResolvedSchema(name="Pet")

    schema.apply_extension("timestamps", loader.load("timestamps"))

    assert schema.fields["created_at"].target is StorageType.TIMESTAMP


def test_loads_package_extension_and_caches_it(tmp_path: Path) -> None:
    package = tmp_path / "timestamps"
    package.mkdir()
    (package / "__init__.py").write_text(_TIMESTAMPS_EXTENSION, encoding="utf-8")
    loader = FilesystemExtensionLoader(tmp_path)

    assert loader.load("timestamps") is loader.load("timestamps")


def test_missing_extension_raises(tmp_path: Path) -> None:
    loader = FilesystemExtensionLoader(tmp_path)

    with pytest.raises(ExtensionLoadError, match="not found"):
        loader.load("timestamps")


def test_extension_without_entrypoint_raises(tmp_path: Path) -> None:
    (tmp_path / "broken.py").write_text("VALUE = 1\n", encoding="utf-8")
    loader = FilesystemExtensionLoader(tmp_path)

    with pytest.raises(ExtensionLoadError, match="extend"):
        loader.load("broken")


def test_extension_import_failure_raises(tmp_path: Path) -> None:
    (tmp_path / "failing.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
    loader = FilesystemExtensionLoader(tmp_path)

    with pytest.raises(ExtensionLoadError, match="boom"):
        loader.load("failing")


@pytest.mark.parametrize("name", ["", "../outside", "nested/timestamps"])
def test_rejects_names_escaping_base_path(tmp_path: Path, name: str) -> None:
    loader = FilesystemExtensionLoader(tmp_path)

    with pytest.raises(ExtensionLoadError, match="Invalid extension name"):
        loader.load(name)
