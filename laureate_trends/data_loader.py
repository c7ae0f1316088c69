import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "Data"

REQUIRED_COLUMNS = ("year", "category", "fullname")


class DataLoader:
    def __init__(self, pattern="nobel_laureates", path=None):
        if path is None:
            # find the latest file matching pattern
            files = sorted(DATA_DIR.glob(f"*{pattern}*.csv"))
            if not files:
                raise FileNotFoundError(f"No file matching *{pattern}*.csv in {DATA_DIR}")
            path = files[-1]
        self.file_path = Path(path)
        if not self.file_path.is_file():
            raise FileNotFoundError(f"Data file {self.file_path} does not exist")

    def load(self) -> pd.DataFrame:
        # keep everything as text, empty cells as "" rather than NaN
        df = pd.read_csv(self.file_path, dtype=str, keep_default_na=False)
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise KeyError(f"Expected column(s) {', '.join(missing)} not in {self.file_path.name}")

        df["year"] = parse_years(df["year"])
        df["name"] = df["fullname"]
        logger.info("Loaded %d records from %s", len(df), self.file_path)
        return df


def parse_years(raw: pd.Series) -> pd.Series:
    """
    Parse text years into nullable integers.
    Non-numeric, fractional and out-of-range values become <NA>.
    """
    years = pd.to_numeric(raw, errors="coerce")
    years = years.where((years % 1 == 0) & (years.abs() < 2.0 ** 63))
    return years.astype("Int64")
