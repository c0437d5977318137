"""Schema report workbook writer."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from swagger_model_compiler.schema_resolution.resolved_schemas import ResolvedSchema

from .constants import (
    COLLECTION_COLUMNS,
    COLLECTIONS_SHEET_NAME,
    SCHEMA_COLUMNS,
    SCHEMAS_SHEET_NAME,
)


def write_schema_workbook(
    schemas: Mapping[str, ResolvedSchema],
    output_path: Path | str,
    models: Mapping[str, Any] | None = None,
) -> Path:
    """Write one row per schema field and one row per bound collection."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = SCHEMAS_SHEET_NAME

    _write_header(sheet, SCHEMA_COLUMNS)
    row_index = 2
    for name, schema in schemas.items():
        for row in _schema_rows(name, schema):
            for column_index, value in enumerate(row, start=1):
                sheet.cell(row=row_index, column=column_index, value=value)
            row_index += 1

    collections_sheet = workbook.create_sheet(COLLECTIONS_SHEET_NAME)
    _write_header(collections_sheet, COLLECTION_COLUMNS)
    for row_index, (model_name, handle) in enumerate((models or {}).items(), start=2):
        schema = schemas.get(model_name)
        extensions = ", ".join(schema.applied_extensions) if schema else ""
        collections_sheet.cell(row=row_index, column=1, value=model_name)
        collections_sheet.cell(row=row_index, column=2, value=getattr(handle, "name", model_name))
        collections_sheet.cell(row=row_index, column=3, value=extensions or None)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _write_header(sheet: Worksheet, columns: tuple[str, ...]) -> None:
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 4"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )


_SchemaRow = tuple[str, str | None, str, str, str | None]


def _schema_rows(name: str, schema: ResolvedSchema) -> list[_SchemaRow]:
    if schema.storage_type is not None:
        return [(name, None, schema.storage_type.value, "no", None)]
    rows: list[_SchemaRow] = []
    for field_name, resolved_field in schema.fields.items():
        target = resolved_field.target
        nested: str | None = None
        if isinstance(target, ResolvedSchema):
            storage_type, nested = "schema", target.name
        else:
            storage_type = target.value
        rows.append(
            (name, field_name, storage_type, "yes" if resolved_field.is_array else "no", nested)
        )
    return rows
