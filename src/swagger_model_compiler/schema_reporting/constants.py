"""Shared schema report constants."""

from __future__ import annotations

SCHEMAS_SHEET_NAME = "Schemas"
COLLECTIONS_SHEET_NAME = "Collections"

SCHEMA_COLUMNS: tuple[str, ...] = ("Definition", "Field", "Storage Type", "Array", "Nested Schema")
COLLECTION_COLUMNS: tuple[str, ...] = ("Model", "Collection", "Extensions")
