"""
Figure builders for the on-screen chart.
"""

from .stacked import ChartKind, ChartSpec, SeriesDescriptor, build_figure, chart_spec

__all__ = [
    "ChartKind",
    "ChartSpec",
    "SeriesDescriptor",
    "build_figure",
    "chart_spec",
]
