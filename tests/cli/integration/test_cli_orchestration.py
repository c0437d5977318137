"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from openpyxl import load_workbook
from swagger_model_compiler.cli import cli, main
from swagger_model_compiler.schema_reporting import COLLECTIONS_SHEET_NAME, SCHEMAS_SHEET_NAME


def _write_config(tmp_path: Path, owner_reference: str = "#/definitions/Owner") -> Path:
    swagger = {
        "swagger": "2.0",
        "definitions": {
            "Pet": {
                "properties": {
                    "name": {"type": "string"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "owner": {"$ref": owner_reference},
                }
            },
            "Owner": {"properties": {"id": {"type": "integer"}}},
            "NotFoundError": {"properties": {"message": {"type": "string"}}},
        },
        "x-persistence": {"type": "memory", "models": {"Pet": {"collection": "pets"}}},
    }
    swagger_path = tmp_path / "swagger.yaml"
    swagger_path.write_text(yaml.safe_dump(swagger, sort_keys=False), encoding="utf-8")
    config_path = tmp_path / "compiler.json"
    config_path.write_text(
        json.dumps({"specification": {"path": swagger_path.name}, "binding": {"store": "memory"}}),
        encoding="utf-8",
    )
    return config_path


def test_compile_command_prints_schema_description(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["compile", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert set(report["schemas"]) == {"Pet", "Owner"}
    assert report["schemas"]["Pet"]["fields"]["owner"] == {"schema": "Owner"}
    assert report["schemas"]["Pet"]["fields"]["tags"] == {"type": "text", "array": True}
    assert report["collections"] == {"Pet": "pets"}


def test_compile_command_supports_yaml_output(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["compile", "--config", str(config_path), "--format", "yaml"])

    assert result.exit_code == 0, result.output
    report = yaml.safe_load(result.output)
    assert report["schemas"]["Owner"] == {"fields": {"id": {"type": "numeric"}}}


def test_compile_command_reports_unsupported_reference(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, owner_reference="Owner")

    exit_code = main(["compile", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Unsupported schema reference Owner" in captured.err
    assert captured.out == ""


def test_export_schemas_command_writes_workbook(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "schemas.xlsx"

    result = runner.invoke(
        cli,
        ["export-schemas", "--config", str(config_path), "--output", str(output_path)],
    )

    assert result.exit_code == 0, result.output
    assert output_path.exists()
    workbook = load_workbook(output_path)
    assert SCHEMAS_SHEET_NAME in workbook.sheetnames
    collections = list(workbook[COLLECTIONS_SHEET_NAME].iter_rows(values_only=True))
    assert collections[1][:2] == ("Pet", "pets")


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "compiler.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert str(output_path.resolve()) in result.output
