"""Tests for configuration loading and the command line."""

import json
import os
import sys

import pytest
from openpyxl import load_workbook

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))

from create_sample_workbook import create_sample_workbook

from sheet_tables.config import DEFAULTS, load_config
from sheet_tables.main import main


@pytest.fixture
def sample_wb(tmp_path):
    path = str(tmp_path / "sample.xlsx")
    create_sample_workbook(path)
    return path


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_default_config():
    assert load_config(None) == DEFAULTS
    assert load_config("/does/not/exist.yaml") == DEFAULTS


def test_custom_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("default_value: n/a\noutput_format: markdown\n")
    config = load_config(str(path))
    assert config["default_value"] == "n/a"
    assert config["output_format"] == "markdown"
    assert config["log_level"] == "INFO"


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == DEFAULTS


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_tables_command(sample_wb, capsys):
    out = json.loads(_run(capsys, "tables", sample_wb))
    assert set(out) == {"Inventory", "Rates", "Empty"}
    assert out["Inventory"][0]["name"] == "Stock"
    assert out["Inventory"][0]["area"] == "B2:D6"


def test_tables_command_single_sheet(sample_wb, capsys):
    out = json.loads(_run(capsys, "tables", sample_wb, "--sheet", "Rates"))
    assert list(out) == ["Rates"]


def test_column_command(sample_wb, capsys):
    out = json.loads(_run(capsys, "column", sample_wb, "Stock", "Qty"))
    assert out == [5, 10, 2]


def test_column_command_indexed(sample_wb, capsys):
    out = json.loads(_run(capsys, "column", sample_wb, "Stock", "Qty", "--indexed"))
    assert out == [{"row": 0, "value": 5}, {"row": 2, "value": 10},
                   {"row": 3, "value": 2}]


def test_keyvalues_command(sample_wb, capsys):
    out = json.loads(_run(capsys, "keyvalues", sample_wb, "RateTable",
                          "Code", "Rate", "--default", "missing"))
    assert out == [{"key": "USD", "value": 1.0},
                   {"key": "EUR", "value": "missing"},
                   {"key": "GBP", "value": 1.27}]


def test_keyvalues_uses_config_default(sample_wb, tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("default_value: 0\n")
    out = json.loads(_run(capsys, "--config", str(config), "keyvalues",
                          sample_wb, "RateTable", "Code", "Rate"))
    assert out[1] == {"key": "EUR", "value": 0}


def test_matrix_command_formats(sample_wb, capsys):
    records = json.loads(_run(capsys, "matrix", sample_wb, "RateTable"))
    assert {"header": "Rate", "row": 2, "value": 1.27} in records
    assert len(records) == 5

    md = _run(capsys, "matrix", sample_wb, "RateTable", "--format", "markdown")
    assert "| Code | Rate |" in md
    assert "| EUR |  |" in md

    csv = _run(capsys, "matrix", sample_wb, "RateTable", "--format", "csv")
    assert csv.splitlines()[0] == "Code,Rate"
    assert csv.splitlines()[2] == "EUR,"


def test_create_command(sample_wb, tmp_path, capsys):
    output = str(tmp_path / "with_table.xlsx")
    out = json.loads(_run(capsys, "create", sample_wb, "Inventory", "Prices",
                          "B2:D4", "--output", output))
    assert [c["name"] for c in out["columns"]] == ["Item", "Qty", "Price"]
    wb = load_workbook(output)
    assert "Prices" in wb["Inventory"].tables
    wb.close()


@pytest.mark.parametrize("argv", [
    ["column", "{wb}", "Nope", "Qty"],
    ["column", "{wb}", "Stock", "Nope"],
    ["keyvalues", "{wb}", "Stock", "Qty", "Item"],
    ["create", "{wb}", "Inventory", "Bad", "D2:B4"],
    ["create", "{wb}", "Inventory", "Bad", "A1:B4"],
])
def test_errors_exit_with_status_1(sample_wb, capsys, argv):
    argv = [a.format(wb=sample_wb) for a in argv]
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["tables", str(tmp_path / "missing.xlsx")])
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().out
