from pathlib import Path

import pandas as pd
import pytest
from openpyxl import load_workbook
from streamlit.testing.v1 import AppTest

from laureate_trends import data_loader
from laureate_trends.ui import excel_download

ROOT = Path(__file__).parent.parent


def laureate_page():
    from laureate_trends.ui import run_app

    run_app()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(data_loader, "DATA_DIR", tmp_path)
    return tmp_path


def run_page(app=None) -> AppTest:
    at = app or AppTest.from_function(laureate_page, default_timeout=30)
    return at.run()


def test_excel_download_has_data_and_metadata_sheets():
    table = pd.DataFrame({"Year": [1990, 1991], "STEM": [1, 1]})

    towrite = excel_download(table, {"Years": "1990 to 1991", "Records": 3})

    wb = load_workbook(towrite)
    assert wb.sheetnames == ["Data", "Metadata"]
    assert [c.value for c in wb["Data"][1]] == ["Year", "STEM"]
    assert [c.value for c in wb["Data"][3]] == [1991, 1]
    assert [c.value for c in wb["Metadata"][2]] == ["Years", "1990 to 1991"]
    assert wb["Metadata"]["B3"].value == 3


def test_page_draws_chart_table_and_download(data_dir):
    (data_dir / "nobel_laureates.csv").write_text(
        "year,category,fullname\n"
        "1990,Physics,A\n"
        "1990,Literature,B\n"
        "1991,Medicine,C\n",
        encoding="utf-8",
    )

    at = run_page()

    assert not at.exception
    assert not at.error
    assert at.title[0].value == "Laureate Trends"
    assert len(at.get("plotly_chart")) == 1
    assert list(at.dataframe[0].value.columns) == ["Year", "STEM", "Non-STEM"]
    assert len(at.get("download_button")) == 1


def test_page_with_no_valid_years_shows_empty_chart(data_dir):
    (data_dir / "nobel_laureates.csv").write_text(
        "year,category,fullname\nunknown,physics,A\n1e20,peace,B\n",
        encoding="utf-8",
    )

    at = run_page()

    assert not at.exception
    assert len(at.get("plotly_chart")) == 1
    assert "No laureates" in at.info[0].value
    assert len(at.dataframe) == 0
    assert len(at.get("download_button")) == 0


def test_page_stops_when_data_cannot_be_loaded(data_dir, caplog):
    at = run_page()

    assert not at.exception
    assert at.error[0].value.startswith("Could not load laureate data")
    assert len(at.get("plotly_chart")) == 0
    assert len(at.dataframe) == 0
    assert "Could not load laureate data" in caplog.text


def test_launcher_runs_with_bundled_data():
    at = run_page(AppTest.from_file(str(ROOT / "app.py"), default_timeout=30))

    assert not at.exception
    assert len(at.get("plotly_chart")) == 1
