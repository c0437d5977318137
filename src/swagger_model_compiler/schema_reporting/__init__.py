"""Schema reporting exports."""

from .constants import COLLECTIONS_SHEET_NAME, SCHEMA_COLUMNS, SCHEMAS_SHEET_NAME
from .schema_description import describe_field, describe_schema, describe_schemas
from .schema_workbook_writer import write_schema_workbook

__all__ = [
    "COLLECTIONS_SHEET_NAME",
    "SCHEMAS_SHEET_NAME",
    "SCHEMA_COLUMNS",
    "describe_field",
    "describe_schema",
    "describe_schemas",
    "write_schema_workbook",
]
