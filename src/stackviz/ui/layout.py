"""
Main Editor Layout.
"""

from dash import html, dcc
import dash_bootstrap_components as dbc

from ..core.config import EditorConfig, get_default_config
from ..dataset import Dataset, default_dataset
from .editor import create_editor_panel
from .panels import create_legend_items, create_tooltip


def create_controls(config: EditorConfig):
    """Create the control bar: chart type, labels, editor toggle, exports."""
    chart = config.chart
    return dbc.Row([
        dbc.Col([
            dbc.Label("Chart Type"),
            dcc.Dropdown(
                id="chart-type-dropdown",
                options=[
                    {"label": "Stacked Area", "value": "area"},
                    {"label": "Stacked Bar", "value": "bar"},
                ],
                value=chart.default_kind,
                clearable=False,
                style={"minWidth": "12rem"},
            ),
        ], width="auto"),

        dbc.Col([
            dbc.Label("Chart Title"),
            dbc.Input(id="chart-title-input", value=chart.default_title, type="text", debounce=True),
        ]),

        dbc.Col([
            dbc.Label("Y-Axis Label"),
            dbc.Input(id="y-label-input", value=chart.default_y_label, type="text", debounce=True),
        ]),

        dbc.Col([
            dbc.Button("Edit Data", id="editor-toggle", color="primary", className="me-2"),
            dbc.Button("\U0001F4E5 Download Chart", id="download-chart-btn", color="success", className="me-2"),
            dbc.Button("\U0001F4E5 Download Legend", id="download-legend-btn", color="secondary"),
        ], width="auto"),
    ], className="g-3 mb-3 align-items-end")


def create_status_bar():
    """Create the status indicators for edits and exports."""
    return dbc.Row([
        dbc.Col(html.Div(id="edit-status")),
        dbc.Col(html.Div(id="chart-export-status")),
        dbc.Col(html.Div(id="legend-export-status")),
    ], className="g-2 mb-3")


def create_chart_panel(config: EditorConfig):
    """Create the chart card."""
    return dbc.Card([
        dbc.CardBody([
            dcc.Graph(
                id="chart-graph",
                config={"displaylogo": False},
                style={"height": f"{config.chart.height}px"},
            ),
        ])
    ], className="bg-light h-100")


def create_side_panel(dataset: Dataset):
    """Create the legend and hover tooltip cards."""
    return html.Div([
        dbc.Card([
            dbc.CardHeader("Legend"),
            dbc.CardBody(html.Div(create_legend_items(dataset), id="legend-items")),
        ], className="mb-3"),
        dbc.Card([
            dbc.CardHeader("Values"),
            dbc.CardBody(html.Div(create_tooltip(dataset, None), id="chart-tooltip")),
        ]),
    ])


def create_guide():
    """Create the quick guide."""
    tips = [
        "Click \"Edit Data\" to customize organisms, categories, and values",
        "Add/remove organisms and categories as needed",
        "Change organism colors by typing a hex code (e.g. #4169E1)",
        "Switch between Area and Bar chart types",
        "Customize chart title and Y-axis label",
        "Click \"Download Chart\" to save the chart as a PNG image",
        "Click \"Download Legend\" to save the legend as a separate PNG image",
    ]
    return dbc.Alert([
        html.H5("Quick Guide:"),
        html.Ul([html.Li(tip) for tip in tips], className="small mb-0"),
    ], color="info", className="mt-4")


def create_layout(config: EditorConfig = None, dataset: Dataset = None):
    """Create the main editor layout."""
    config = config or get_default_config()
    dataset = dataset or default_dataset()

    return dbc.Container([
        # Header
        html.H2(config.chart.default_title, id="page-title", className="mb-4"),

        create_controls(config),
        create_status_bar(),

        dbc.Collapse(create_editor_panel(dataset), id="editor-collapse", is_open=False),

        dbc.Row([
            dbc.Col(create_chart_panel(config), lg=9),
            dbc.Col(create_side_panel(dataset), lg=3),
        ], className="g-3"),

        create_guide(),

        # Session state and download targets
        dcc.Store(id="dataset-store", data=dataset.to_dict(), storage_type="memory"),
        dcc.Download(id="download-chart"),
        dcc.Download(id="download-legend"),

    ], fluid=True, className="p-4")
