from enum import Enum

import pandas as pd

STEM_CATEGORIES = frozenset({"physics", "chemistry", "medicine"})

GROUP_COLUMN = "categoryGroup"


class CategoryGroup(str, Enum):
    STEM = "STEM"
    NON_STEM = "Non-STEM"


def classify(category) -> CategoryGroup:
    """
    Map a free-text category to its group.
    Anything outside STEM_CATEGORIES (unknown, empty, missing) is Non-STEM.
    """
    if isinstance(category, str) and category.lower() in STEM_CATEGORIES:
        return CategoryGroup.STEM
    return CategoryGroup.NON_STEM


def classify_records(df: pd.DataFrame) -> pd.DataFrame:
    classified = df.copy()
    classified[GROUP_COLUMN] = classified["category"].map(classify)
    return classified
