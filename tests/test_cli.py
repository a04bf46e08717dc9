import json

import pytest
import yaml
from openpyxl import Workbook

from cli import build_config, main, parse_args
from core.errors import OptionsValidationError
from utils import EXIT_INFERENCE_ERROR, EXIT_INVALID_OPTIONS, EXIT_RUNTIME_ERROR, EXIT_SUCCESS


@pytest.fixture()
def csv_path(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text("id,id,val\n1,a,1.5\n2,b,\n3,c,NA\n")
    return path


def test_infer_prints_json(csv_path, capsys):
    assert main(["infer", str(csv_path)]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert json.loads(out) == {"id": "int", "id_1": "string", "val": "float"}


def test_infer_with_overrides_and_columns(csv_path, capsys):
    argv = ["infer", str(csv_path), "--columns", "0,2", "--dtype", "2=string", "--format", "yaml"]
    assert main(argv) == EXIT_SUCCESS
    assert yaml.safe_load(capsys.readouterr().out) == {"id": "int", "val": "string"}


def test_infer_arrow_format(csv_path, capsys):
    assert main(["infer", str(csv_path), "--format", "arrow"]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert "id_1: string" in out
    assert "val: double" in out


def test_flags_override_config_file(tmp_path, csv_path):
    config = tmp_path / "options.yaml"
    config.write_text("n_rows: 1\ndtypes:\n  id: float\n")
    args = parse_args(
        ["infer", str(csv_path), "--config", str(config), "--dtype", "val=int", "--n-rows", "2"]
    )
    assert build_config(args) == {"n_rows": 2, "dtypes": {"id": "float", "val": "int"}}


def test_sheet_flag_accepts_index(csv_path):
    args = parse_args(["infer", str(csv_path), "--sheet", "1"])
    assert build_config(args) == {"sheet": 1}


def test_malformed_dtype_flag(csv_path):
    args = parse_args(["infer", str(csv_path), "--dtype", "val"])
    with pytest.raises(OptionsValidationError):
        build_config(args)


@pytest.mark.parametrize(
    "extra",
    [
        ["--dtype", "val=decimal"],
        ["--dtype", "=int"],
        ["--n-rows", "-1"],
    ],
)
def test_invalid_options_exit_code(csv_path, capsys, extra):
    assert main(["infer", str(csv_path), *extra]) == EXIT_INVALID_OPTIONS
    assert "Invalid options" in capsys.readouterr().err


def test_missing_dataset_exit_code(tmp_path, capsys):
    assert main(["infer", str(tmp_path / "missing.csv")]) == EXIT_RUNTIME_ERROR
    assert "not found" in capsys.readouterr().err


def test_inference_error_exit_code(tmp_path, capsys):
    wb = Workbook()
    wb.active.append(["total"])
    wb.active.append(["#DIV/0!"])
    path = tmp_path / "broken.xlsx"
    wb.save(path)

    assert main(["infer", str(path)]) == EXIT_INFERENCE_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "#DIV/0!" in captured.err


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--version"])
    assert excinfo.value.code == 0
    assert "sheetschema 0.1.0" in capsys.readouterr().out


def test_sheet_name_is_taken_literally(tmp_path, capsys):
    wb = Workbook()
    wb.active.title = "first"
    wb.active.append(["x"])
    wb.active.append(["text"])
    digits = wb.create_sheet("2024")
    digits.append(["n"])
    digits.append([1])
    path = tmp_path / "years.xlsx"
    wb.save(path)

    args = parse_args(["infer", str(path), "--sheet-name", "2024"])
    assert build_config(args) == {"sheet": "2024"}
    assert main(["infer", str(path), "--sheet-name", "2024"]) == EXIT_SUCCESS
    assert json.loads(capsys.readouterr().out) == {"n": "int"}


def test_sheet_and_sheet_name_are_exclusive(csv_path):
    with pytest.raises(SystemExit):
        parse_args(["infer", str(csv_path), "--sheet", "0", "--sheet-name", "a"])
