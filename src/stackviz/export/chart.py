"""
Chart export: rendered figure -> PNG.

Takes the figure payload currently shown by the chart component (plotly
JSON with "data" and "layout") and rasterizes it through plotly's static
image engine (kaleido) at `scale` times the displayed pixel size. A
transparent page background is filled so the image is never see-through.
"""

from typing import Any, Dict, Optional

import plotly.graph_objects as go
import plotly.io as pio

from ..core.config import EditorConfig, ExportConfig, get_default_config
from ..core.logging import get_logger
from ..figures.stacked import TRANSPARENT
from .result import ExportError, ExportResult, chart_filename


def render_chart_png(
    figure: Optional[Dict[str, Any]],
    export_config: Optional[ExportConfig] = None,
    default_size: tuple = (900, 500),
) -> bytes:
    """
    Rasterize a rendered stacked chart.

    Args:
        figure: Plotly figure payload as held by the chart component
        export_config: Scale and background settings
        default_size: (width, height) in pixels when the layout has none

    Returns:
        PNG image as bytes

    Raises:
        ExportError: If there is no rendered chart or rasterizing fails
    """
    if not isinstance(figure, dict) or "data" not in figure:
        raise ExportError("no rendered chart to export")

    cfg = export_config or ExportConfig()

    try:
        fig = go.Figure(figure, skip_invalid=True)
    except ValueError as e:
        raise ExportError(f"chart payload is not a plotly figure: {e}") from e

    if fig.layout.paper_bgcolor in (None, TRANSPARENT):
        fig.update_layout(paper_bgcolor=cfg.chart_background)

    width = fig.layout.width or default_size[0]
    height = fig.layout.height or default_size[1]

    try:
        return pio.to_image(fig, format="png", width=width, height=height, scale=cfg.scale)
    except (ValueError, RuntimeError, OSError) as e:
        raise ExportError(f"chart could not be rasterized: {e}") from e


def export_chart(
    figure: Optional[Dict[str, Any]],
    title: Optional[str],
    config: Optional[EditorConfig] = None
) -> ExportResult:
    """
    Export the rendered chart as `<title>_chart.png`.

    Failures are logged and returned as a failed result.
    """
    config = config or get_default_config()
    logger = get_logger()
    filename = chart_filename(title)

    try:
        content = render_chart_png(
            figure,
            config.export,
            default_size=(config.chart.width, config.chart.height),
        )
    except ExportError as e:
        logger.warning(f"Chart export failed: {e}")
        return ExportResult.failure(filename, str(e))

    logger.info(f"Exported chart {filename} ({len(content)} bytes)")
    return ExportResult.success(filename, content)
