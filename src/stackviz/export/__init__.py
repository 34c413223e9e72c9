"""
Raster export of the chart and its legend.
"""

from .result import (
    ExportError,
    ExportResult,
    slugify_title,
    chart_filename,
    legend_filename,
)
from .chart import render_chart_png, export_chart
from .legend import legend_size, render_legend_png, export_legend

__all__ = [
    "ExportError",
    "ExportResult",
    "slugify_title",
    "chart_filename",
    "legend_filename",
    "render_chart_png",
    "export_chart",
    "legend_size",
    "render_legend_png",
    "export_legend",
]
