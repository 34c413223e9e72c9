"""
Stacked Chart Editor.

Edit a labeled dataset, render it as a stacked bar or area chart and
export the chart and its legend as PNG images.
"""

__version__ = "1.0.0"

from .dataset import (
    Dataset,
    Series,
    Category,
    DatasetError,
    DatasetIndexError,
    default_dataset,
    parse_value,
)
from .projector import project, tooltip_entries

__all__ = [
    "Dataset",
    "Series",
    "Category",
    "DatasetError",
    "DatasetIndexError",
    "default_dataset",
    "parse_value",
    "project",
    "tooltip_entries",
]
