import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from laureate_trends.classifier import GROUP_COLUMN, CategoryGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearCount:
    year: int
    count: int


@dataclass(frozen=True)
class GroupSeries:
    categoryGroup: CategoryGroup
    values: tuple[YearCount, ...]


def _with_valid_years(records: pd.DataFrame) -> pd.DataFrame:
    valid = records[records["year"].notna()]
    skipped = len(records) - len(valid)
    if skipped:
        logger.warning("Skipping %d record(s) without a valid year", skipped)
    return valid


def aggregate(classified: pd.DataFrame) -> list[GroupSeries]:
    """
    Count classified records per (categoryGroup, year).

    Returns one GroupSeries per group present in the data, in CategoryGroup
    order, each with its (year, count) pairs sorted by year. Years a group
    never appears in are left out, not zero-filled.
    """
    valid = _with_valid_years(classified)
    if valid.empty:
        return []

    groups = valid[GROUP_COLUMN].map(lambda group: CategoryGroup(group))
    counts = valid.assign(**{GROUP_COLUMN: groups}).groupby([GROUP_COLUMN, "year"]).size()

    # group -> {year: count}
    buckets: dict[CategoryGroup, dict[int, int]] = {}
    for (group, year), count in counts.items():
        buckets.setdefault(CategoryGroup(group), {})[int(year)] = int(count)

    return [
        GroupSeries(
            categoryGroup=group,
            values=tuple(YearCount(year, count) for year, count in sorted(buckets[group].items())),
        )
        for group in CategoryGroup
        if group in buckets
    ]


def year_domain(records: pd.DataFrame) -> Optional[tuple[int, int]]:
    # extent over all records, independent of grouping
    years = records["year"].dropna()
    if years.empty:
        return None
    return int(years.min()), int(years.max())


def max_count(series: list[GroupSeries]) -> int:
    return max((v.count for s in series for v in s.values), default=0)


def to_long_frame(series: list[GroupSeries]) -> pd.DataFrame:
    rows = [
        {GROUP_COLUMN: s.categoryGroup.value, "year": v.year, "count": v.count}
        for s in series
        for v in s.values
    ]
    return pd.DataFrame(rows, columns=[GROUP_COLUMN, "year", "count"])


def to_wide_frame(series: list[GroupSeries]) -> pd.DataFrame:
    """One row per year, one column per group; missing counts stay <NA>."""
    if not series:
        return pd.DataFrame(columns=["year"])
    wide = (
        to_long_frame(series)
        .pivot(index="year", columns=GROUP_COLUMN, values="count")
        .astype("Int64")
    )
    wide = wide[[s.categoryGroup.value for s in series]]
    wide.columns.name = None
    return wide.reset_index()
