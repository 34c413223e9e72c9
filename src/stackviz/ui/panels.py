"""
Side panels: legend, hover tooltip and status messages.
"""

from typing import Optional

from dash import html
import dash_bootstrap_components as dbc

from ..dataset import Dataset
from ..projector import format_value, tooltip_entries


def create_legend_items(dataset: Dataset) -> list:
    """Swatch + name per series, in series order."""
    return [
        html.Div([
            html.Div(style={
                "backgroundColor": series.color,
                "width": "1.5rem",
                "height": "1.5rem",
                "border": "1px solid #d1d5db",
                "borderRadius": "0.25rem",
                "flexShrink": 0,
            }),
            html.Span(series.name, className="small text-secondary"),
        ], className="d-flex align-items-center gap-3 mb-2")
        for series in dataset.series
    ]


def create_tooltip(dataset: Dataset, category_index: Optional[int], suffix: str = "%") -> list:
    """
    Values of the hovered category, top of the stack first.

    Args:
        dataset: Current dataset
        category_index: Hovered category, or None when nothing is hovered
        suffix: Unit appended to each value
    """
    if category_index is None:
        return [html.P("Hover over the chart to see values.", className="text-muted small mb-0")]

    label = dataset.categories[category_index].label
    lines = [
        html.P(f"{entry.name}: {format_value(entry.value)}{suffix}",
               style={"color": entry.color}, className="small mb-0")
        for entry in tooltip_entries(dataset, category_index)
    ]
    return [html.P(label, className="fw-semibold mb-2")] + lines


def status_alert(message: Optional[str], level: str = "success"):
    """Dismissable status line; empty when there is nothing to report."""
    if not message:
        return None
    return dbc.Alert(message, color=level, dismissable=True, className="py-2 mb-0 small")
