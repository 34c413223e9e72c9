"""
Editor UI components and callback logic.
"""

from .layout import create_layout
from .editor import create_editor_panel, create_series_rows, create_category_cards
from .panels import create_legend_items, create_tooltip, status_alert
from .actions import EditOutcome, apply_edit, hovered_category, load_dataset

__all__ = [
    "create_layout",
    "create_editor_panel",
    "create_series_rows",
    "create_category_cards",
    "create_legend_items",
    "create_tooltip",
    "status_alert",
    "EditOutcome",
    "apply_edit",
    "hovered_category",
    "load_dataset",
]
