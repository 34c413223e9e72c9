"""
Chart Projector: Dataset -> row-oriented chart data.

One row per category with a "label" field plus one field per series name.
The category label is written last, so a series named "label" cannot hide
it. Rows are recomputed on every render and never mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd

from .dataset import Dataset


LABEL_KEY = "label"


@dataclass(frozen=True)
class TooltipEntry:
    """One line of the hover tooltip."""
    name: str
    color: str
    value: float


def project(dataset: Dataset) -> List[Dict[str, Any]]:
    """
    Project a dataset into chart rows.

    Args:
        dataset: Source dataset

    Returns:
        List of {"label": ..., <series name>: value} dictionaries
    """
    rows = []
    for cat in dataset.categories:
        row: Dict[str, Any] = {}
        for idx, series in enumerate(dataset.series):
            row[series.name] = cat.values[idx] if idx < len(cat.values) else 0.0
        row[LABEL_KEY] = cat.label
        rows.append(row)
    return rows


def to_frame(dataset: Dataset) -> pd.DataFrame:
    """
    Dataset as a table: one row per category, one column per series.

    Built by position, so duplicate or colliding series names keep their
    own columns.
    """
    return pd.DataFrame(
        [list(cat.values) for cat in dataset.categories],
        index=pd.Index([cat.label for cat in dataset.categories], name=LABEL_KEY),
        columns=[s.name for s in dataset.series],
    )


def tooltip_entries(dataset: Dataset, category_index: int) -> List[TooltipEntry]:
    """
    Tooltip lines for a hovered category, top of the stack first.

    Args:
        dataset: Source dataset
        category_index: Hovered category position

    Returns:
        Entries in reverse series order
    """
    values = dataset.categories[category_index].values
    entries = [
        TooltipEntry(name=s.name, color=s.color, value=values[idx] if idx < len(values) else 0.0)
        for idx, s in enumerate(dataset.series)
    ]
    return list(reversed(entries))


def format_value(value: float) -> str:
    """Format a value the way it is typed: 25.0 -> '25', 12.5 -> '12.5'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(value, ".15g")
