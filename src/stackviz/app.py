"""
Stacked Chart Editor - Main Application.

Edit a small labeled dataset, view it as a stacked bar or area chart and
download the chart and its legend as PNG images.
"""

from typing import Any, Dict, Optional

from dash import Dash, dcc, ctx, no_update, Output, Input, State, ALL
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

from .core.config import EditorConfig, get_default_config
from .core.logging import get_logger
from .dataset import default_dataset
from .figures.stacked import build_figure, chart_spec
from .export import export_chart, export_legend, ExportResult
from .ui.actions import (
    ADD_CATEGORY,
    ADD_SERIES,
    CATEGORY_LABEL,
    CELL_VALUE,
    REMOVE_CATEGORY,
    REMOVE_SERIES,
    SERIES_COLOR,
    SERIES_NAME,
    apply_edit,
    hovered_category,
    load_dataset,
)
from .ui.editor import create_series_rows, create_category_cards
from .ui.layout import create_layout
from .ui.panels import create_legend_items, create_tooltip, status_alert


def create_app(config: Optional[EditorConfig] = None) -> Dash:
    """
    Create the Dash application.

    Args:
        config: Editor configuration (defaults when None)

    Returns:
        Configured Dash app with callbacks registered
    """
    config = config or get_default_config()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.BOOTSTRAP],
        title="Stacked Chart Editor",
    )
    app.layout = create_layout(config, default_dataset())
    _register_callbacks(app, config)
    return app


def _download(result: ExportResult):
    """Download payload and status for an export result."""
    if not result.ok:
        return no_update, status_alert(result.status, "danger")
    return dcc.send_bytes(result.content, result.filename), status_alert(result.status, "success")


def _register_callbacks(app: Dash, config: EditorConfig) -> None:
    seed = default_dataset()

    @app.callback(
        Output("dataset-store", "data"),
        Output("edit-status", "children"),
        Input(ADD_SERIES, "n_clicks"),
        Input(ADD_CATEGORY, "n_clicks"),
        Input({"type": REMOVE_SERIES, "index": ALL}, "n_clicks"),
        Input({"type": REMOVE_CATEGORY, "index": ALL}, "n_clicks"),
        Input({"type": SERIES_NAME, "index": ALL}, "value"),
        Input({"type": SERIES_COLOR, "index": ALL}, "value"),
        Input({"type": CATEGORY_LABEL, "index": ALL}, "value"),
        Input({"type": CELL_VALUE, "category": ALL, "series": ALL}, "value"),
        State("dataset-store", "data"),
        prevent_initial_call=True,
    )
    def edit_dataset(*args):
        """Apply the editor action that fired to the session dataset."""
        trigger = ctx.triggered_id
        if trigger is None:
            raise PreventUpdate

        data = args[-1]
        value = ctx.triggered[0].get("value") if ctx.triggered else None

        dataset = load_dataset(data, seed)
        outcome = apply_edit(dataset, trigger, value, config.dataset)

        if not outcome.changed and not outcome.status:
            raise PreventUpdate

        store = outcome.dataset.to_dict() if outcome.changed else no_update
        return store, status_alert(outcome.status, outcome.level)

    @app.callback(
        Output("series-rows", "children"),
        Output("category-cards", "children"),
        Output("legend-items", "children"),
        Input("dataset-store", "data"),
    )
    def render_editor(data: Optional[Dict[str, Any]]):
        """Rebuild editor rows and legend from the session dataset."""
        dataset = load_dataset(data, seed)
        return (
            create_series_rows(dataset),
            create_category_cards(dataset),
            create_legend_items(dataset),
        )

    @app.callback(
        Output("chart-graph", "figure"),
        Output("page-title", "children"),
        Input("dataset-store", "data"),
        Input("chart-type-dropdown", "value"),
        Input("chart-title-input", "value"),
        Input("y-label-input", "value"),
    )
    def render_chart(data: Optional[Dict[str, Any]], kind: str, title: str, y_label: str):
        """Re-render the chart; switching kind is a plain re-render."""
        dataset = load_dataset(data, seed)
        spec = chart_spec(dataset, kind, title, y_label)
        return build_figure(spec, config.chart), title or ""

    @app.callback(
        Output("chart-tooltip", "children"),
        Input("chart-graph", "hoverData"),
        State("dataset-store", "data"),
    )
    def show_tooltip(hover_data: Optional[Dict[str, Any]], data: Optional[Dict[str, Any]]):
        dataset = load_dataset(data, seed)
        index = hovered_category(hover_data, dataset.category_count)
        return create_tooltip(dataset, index, config.chart.value_suffix)

    @app.callback(
        Output("editor-collapse", "is_open"),
        Output("editor-toggle", "children"),
        Input("editor-toggle", "n_clicks"),
        State("editor-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_editor(n_clicks: Optional[int], is_open: bool):
        is_open = not is_open
        return is_open, "Hide Editor" if is_open else "Edit Data"

    @app.callback(
        Output("download-chart", "data"),
        Output("chart-export-status", "children"),
        Input("download-chart-btn", "n_clicks"),
        State("chart-graph", "figure"),
        State("chart-title-input", "value"),
        prevent_initial_call=True,
    )
    def download_chart(n_clicks: Optional[int], figure: Optional[Dict[str, Any]], title: str):
        """Rasterize the chart currently on screen."""
        if not n_clicks:
            raise PreventUpdate
        return _download(export_chart(figure, title, config))

    @app.callback(
        Output("download-legend", "data"),
        Output("legend-export-status", "children"),
        Input("download-legend-btn", "n_clicks"),
        State("dataset-store", "data"),
        State("chart-title-input", "value"),
        prevent_initial_call=True,
    )
    def download_legend(n_clicks: Optional[int], data: Optional[Dict[str, Any]], title: str):
        """Draw the legend for the current series list."""
        if not n_clicks:
            raise PreventUpdate
        return _download(export_legend(load_dataset(data, seed), title, config))


def main(config: Optional[EditorConfig] = None):
    """Run the editor server."""
    config = config or get_default_config()
    logger = get_logger()
    logger.info(f"Starting Stacked Chart Editor on {config.server.host}:{config.server.port}...")
    app = create_app(config)
    app.run(debug=config.server.debug, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
