import os

import pandas as pd
import pytest

import main
from main import get_result_df, solve_floor


@pytest.fixture
def floors_file(tmp_path):
    path = tmp_path / "floors.txt"
    path.write_text("  \n  \n\n   ##   \n\n  \n #\n", encoding="utf-8")
    return str(path)


@pytest.mark.parametrize("solver", sorted(main.SOLVERS))
def test_solve_floor(solver):
    result = solve_floor("  \n  ", solver)
    assert result["tileable"]
    assert result["flow"] == 2
    assert result["solver"] == solver


def test_solve_floor_skips_flow_on_unequal_colors():
    result = solve_floor("  \n #")
    assert result["flow"] is None
    assert not result["tileable"]


def test_main_writes_results(floors_file, tmp_path, capsys):
    out_dir = tmp_path / "results"
    assert main.main([floors_file, "--output-dir", str(out_dir), "--show"]) == 0

    printed = capsys.readouterr().out
    assert "[0]: 4 open cells, tileable" in printed
    assert "[1]: 6 open cells, not tileable" in printed
    assert "[2]: 3 open cells, not tileable" in printed

    csv_files = os.listdir(out_dir)
    assert len(csv_files) == 1
    df = pd.read_csv(out_dir / csv_files[0])
    assert df["tileable"].tolist() == [True, False, False]
    assert df["plan"].tolist() == [0, 1, 2]


def test_main_no_save(floors_file, tmp_path):
    out_dir = tmp_path / "results"
    assert main.main([floors_file, "--output-dir", str(out_dir), "--no-save"]) == 0
    assert not out_dir.exists()


def test_main_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.txt"), "--no-save"]) == 1
    assert "Error" in capsys.readouterr().out


def test_get_result_df_columns():
    df = get_result_df([])
    assert "tileable" in df.columns
    assert df.empty
