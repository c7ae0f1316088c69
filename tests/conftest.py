import pandas as pd
import pytest

from laureate_trends.classifier import classify_records


@pytest.fixture
def sample_records() -> pd.DataFrame:
    return pd.DataFrame({
        "year": pd.array([1990, 1990, 1991], dtype="Int64"),
        "category": ["Physics", "Literature", "Medicine"],
        "fullname": ["A. Physicist", "B. Writer", "C. Doctor"],
    })


@pytest.fixture
def classified(sample_records) -> pd.DataFrame:
    return classify_records(sample_records)


@pytest.fixture
def empty_records() -> pd.DataFrame:
    return pd.DataFrame({
        "year": pd.array([], dtype="Int64"),
        "category": pd.Series([], dtype=object),
        "fullname": pd.Series([], dtype=object),
    })


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="nobel_laureates.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
