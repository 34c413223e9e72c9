"""
Data Editor: series and category/value inputs.
"""

from dash import html
import dash_bootstrap_components as dbc

from ..dataset import Dataset
from ..projector import format_value
from .actions import (
    ADD_CATEGORY,
    ADD_SERIES,
    CATEGORY_LABEL,
    CELL_VALUE,
    REMOVE_CATEGORY,
    REMOVE_SERIES,
    SERIES_COLOR,
    SERIES_NAME,
)


def create_series_rows(dataset: Dataset) -> list:
    """One row per series: name, color swatch and hex, remove button."""
    rows = []
    for idx, series in enumerate(dataset.series):
        rows.append(dbc.Row([
            dbc.Col(dbc.Input(
                id={"type": SERIES_NAME, "index": idx},
                value=series.name,
                type="text",
                placeholder="Organism name",
                debounce=True,
                size="sm",
            )),
            dbc.Col(html.Div(style={
                "backgroundColor": series.color,
                "width": "2rem",
                "height": "2rem",
                "border": "1px solid #d1d5db",
                "borderRadius": "0.25rem",
            }), width="auto"),
            dbc.Col(dbc.Input(
                id={"type": SERIES_COLOR, "index": idx},
                value=series.color,
                type="text",
                placeholder="#RRGGBB",
                debounce=True,
                size="sm",
                style={"width": "7rem"},
            ), width="auto"),
            dbc.Col(dbc.Button(
                "Remove",
                id={"type": REMOVE_SERIES, "index": idx},
                color="danger",
                size="sm",
            ), width="auto"),
        ], className="g-2 mb-2 align-items-center"))
    return rows


def create_category_cards(dataset: Dataset) -> list:
    """One card per category: label, remove button and a value per series."""
    cards = []
    for cat_idx, category in enumerate(dataset.categories):
        value_cells = [
            dbc.Col([
                dbc.Label(series.name, className="small text-muted mb-1"),
                dbc.Input(
                    id={"type": CELL_VALUE, "category": cat_idx, "series": ser_idx},
                    value=format_value(category.values[ser_idx]),
                    type="number",
                    step=0.1,
                    debounce=True,
                    size="sm",
                ),
            ], width=6, md=4, lg=2, className="mb-2")
            for ser_idx, series in enumerate(dataset.series)
        ]

        cards.append(dbc.Card(dbc.CardBody([
            dbc.Row([
                dbc.Col(dbc.Input(
                    id={"type": CATEGORY_LABEL, "index": cat_idx},
                    value=category.label,
                    type="text",
                    placeholder="Category name",
                    debounce=True,
                    className="fw-semibold",
                    size="sm",
                )),
                dbc.Col(dbc.Button(
                    "Remove",
                    id={"type": REMOVE_CATEGORY, "index": cat_idx},
                    color="danger",
                    size="sm",
                ), width="auto"),
            ], className="g-2 mb-2"),
            dbc.Row(value_cells, className="g-2"),
        ]), className="mb-3"))
    return cards


def create_editor_panel(dataset: Dataset) -> dbc.Card:
    """Editor card; only the row containers are re-rendered on edits."""
    return dbc.Card(dbc.CardBody([
        html.Div([
            html.H5("Organisms", className="mb-0"),
            dbc.Button("+ Add Organism", id=ADD_SERIES, color="success", size="sm"),
        ], className="d-flex justify-content-between align-items-center mb-3"),
        html.Div(create_series_rows(dataset), id="series-rows"),
        html.Hr(),
        html.Div([
            html.H5("Categories & Values", className="mb-0"),
            dbc.Button("+ Add Category", id=ADD_CATEGORY, color="success", size="sm"),
        ], className="d-flex justify-content-between align-items-center mb-3"),
        html.Div(create_category_cards(dataset), id="category-cards"),
    ]), className="mb-4 bg-light")
