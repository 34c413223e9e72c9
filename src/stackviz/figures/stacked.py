"""
Stacked bar / stacked area figure.

The render surface only needs {rows, series descriptors, chart kind};
it owns no state and is rebuilt on every dataset or control change.
"""

from dataclasses import dataclass
from enum import Enum
import html
import re
from typing import Any, Dict, List, Optional, Tuple

import plotly.graph_objects as go
from matplotlib.colors import is_color_like, to_rgb

from ..core.config import ChartConfig
from ..dataset import Dataset
from ..projector import project


FALLBACK_COLOR = "#cccccc"
TRANSPARENT = "rgba(0,0,0,0)"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


def display_color(color: str) -> str:
    """
    Color safe to hand to plotly.

    Series colors are stored unvalidated; anything that is neither a hex code
    nor a CSS color name is drawn in a neutral grey.
    """
    if _HEX_COLOR.match(color or ""):
        return color
    if color and color.isalpha() and len(color) > 1 and color.lower() != "none" and is_color_like(color):
        return color
    return FALLBACK_COLOR


def plain_text(text: Any) -> str:
    """
    Escape user text so plotly draws it as typed.

    Plotly reads `<tag>` markup and `$...$` TeX in titles, tick labels and
    legend names; both are turned into entities that it decodes back.
    """
    return html.escape(str(text), quote=False).replace("$", "&#36;")


class ChartKind(str, Enum):
    """Render mode of the chart."""
    BAR = "bar"
    AREA = "area"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ChartKind":
        """Parse a selector value, falling back to bar."""
        try:
            return cls(value)
        except ValueError:
            return cls.BAR


@dataclass(frozen=True)
class SeriesDescriptor:
    """Stacked element key and fill color."""
    key: str
    color: str


@dataclass(frozen=True)
class ChartSpec:
    """
    Everything the render surface needs to draw a chart.

    `rows` is the keyed projection; `labels` and `columns` hold the same
    data by position (one column per descriptor) so that series names
    never collide with each other or with the category label.
    """
    rows: Tuple[Dict[str, Any], ...]
    series: Tuple[SeriesDescriptor, ...]
    kind: ChartKind = ChartKind.BAR
    title: str = ""
    y_label: str = ""
    labels: Tuple[str, ...] = ()
    columns: Tuple[Tuple[float, ...], ...] = ()

    def values_for(self, index: int) -> List[float]:
        """Values of the index-th series, one per category."""
        if index < len(self.columns):
            return list(self.columns[index])
        return [0.0] * len(self.labels)


def chart_spec(
    dataset: Dataset,
    kind: Any = ChartKind.BAR,
    title: str = "",
    y_label: str = ""
) -> ChartSpec:
    """Build a ChartSpec from the current dataset and chart controls."""
    return ChartSpec(
        rows=tuple(project(dataset)),
        series=tuple(SeriesDescriptor(key=s.name, color=display_color(s.color)) for s in dataset.series),
        kind=ChartKind.parse(kind),
        title=title or "",
        y_label=y_label or "",
        labels=tuple(cat.label for cat in dataset.categories),
        columns=tuple(
            tuple(cat.values[idx] for cat in dataset.categories)
            for idx in range(dataset.series_count)
        ),
    )


def _to_rgba(color: str, alpha: float) -> str:
    """Any drawable color as an rgba() string with the given opacity."""
    r, g, b = (round(c * 255) for c in to_rgb(color))
    return f"rgba({r}, {g}, {b}, {alpha})"


def build_figure(spec: ChartSpec, config: Optional[ChartConfig] = None) -> go.Figure:
    """
    Create the stacked chart figure.

    Args:
        spec: Chart inputs from chart_spec()
        config: Chart configuration (size, fill opacity)

    Returns:
        Plotly figure with one trace per series in series order
    """
    config = config or ChartConfig()
    labels = [plain_text(label) for label in spec.labels]
    fig = go.Figure()

    for idx, descriptor in enumerate(spec.series):
        values = spec.values_for(idx)
        if spec.kind == ChartKind.AREA:
            fig.add_trace(go.Scatter(
                x=labels,
                y=values,
                name=plain_text(descriptor.key),
                mode="lines",
                stackgroup="1",
                line=dict(color=descriptor.color, shape="spline"),
                fillcolor=_to_rgba(descriptor.color, config.fill_opacity),
                hoverinfo="none",
            ))
        else:
            fig.add_trace(go.Bar(
                x=labels,
                y=values,
                name=plain_text(descriptor.key),
                marker=dict(color=descriptor.color),
                hoverinfo="none",
            ))

    fig.update_layout(
        title=plain_text(spec.title),
        yaxis_title=plain_text(spec.y_label),
        barmode="stack",
        height=config.height,
        width=config.width,
        plot_bgcolor="#ffffff",
        paper_bgcolor=TRANSPARENT,
        legend=dict(orientation="h", yanchor="top", y=-0.12, xanchor="center", x=0.5),
        margin=dict(l=70, r=20, t=60, b=60),
    )
    fig.update_xaxes(type="category", showgrid=True, griddash="dash", gridcolor="#e5e7eb")
    fig.update_yaxes(showgrid=True, griddash="dash", gridcolor="#e5e7eb")

    return fig
