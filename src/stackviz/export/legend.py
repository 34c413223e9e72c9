"""
Legend export: series list -> PNG.

Drawn directly rather than captured from the page: a title row, then one
swatch and name per series at a fixed row height. Names are drawn as typed,
with mathtext parsing switched off.
"""

import io
from typing import Optional, Sequence, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..core.config import EditorConfig, ExportConfig, get_default_config
from ..core.logging import get_logger
from ..dataset import Dataset, Series
from .result import ExportError, ExportResult, legend_filename


def legend_size(series_count: int, export_config: Optional[ExportConfig] = None) -> Tuple[int, int]:
    """Logical (unscaled) legend size in pixels."""
    cfg = export_config or ExportConfig()
    return cfg.legend_width, series_count * cfg.legend_row_height + cfg.legend_margin


def render_legend_png(series: Sequence[Series], export_config: Optional[ExportConfig] = None) -> bytes:
    """
    Draw the legend image.

    Args:
        series: Series in display order
        export_config: Layout constants and scale

    Returns:
        PNG image as bytes

    Raises:
        ExportError: If a series color cannot be drawn
    """
    cfg = export_config or ExportConfig()
    width, height = legend_size(len(series), cfg)
    dpi = cfg.base_dpi

    def pt(px: float) -> float:
        return px * 72.0 / dpi

    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    buf = io.BytesIO()
    try:
        # Axes spanning the canvas, in pixel units with y growing downwards
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.axis('off')

        ax.add_patch(Rectangle((0, 0), width, height, facecolor=cfg.legend_background,
                               edgecolor=cfg.legend_border, linewidth=pt(2)))
        ax.text(16, 30, cfg.legend_title, fontsize=pt(18), fontweight='bold',
                family='sans-serif', color=cfg.legend_title_color, va='baseline',
                parse_math=False)

        swatch = cfg.legend_swatch_size
        for idx, s in enumerate(series):
            y = 60 + idx * cfg.legend_row_height
            ax.add_patch(Rectangle((16, y), swatch, swatch, facecolor=s.color,
                                   edgecolor=cfg.legend_border, linewidth=pt(1)))
            ax.text(52, y + 17, s.name, fontsize=pt(14), family='sans-serif',
                    color=cfg.legend_text_color, va='baseline',
                    parse_math=False)

        fig.savefig(buf, format='png', dpi=dpi * cfg.scale)
        return buf.getvalue()
    except ValueError as e:
        raise ExportError(f"legend could not be drawn: {e}") from e
    finally:
        plt.close(fig)
        buf.close()


def export_legend(
    dataset: Optional[Dataset],
    title: Optional[str],
    config: Optional[EditorConfig] = None
) -> ExportResult:
    """
    Export the legend as `<title>_legend.png`.

    Failures are logged and returned as a failed result.
    """
    config = config or get_default_config()
    logger = get_logger()
    filename = legend_filename(title)

    if dataset is None:
        logger.warning("Legend export failed: no dataset")
        return ExportResult.failure(filename, "no dataset to export")

    try:
        content = render_legend_png(dataset.series, config.export)
    except ExportError as e:
        logger.warning(f"Legend export failed: {e}")
        return ExportResult.failure(filename, str(e))

    logger.info(f"Exported legend {filename} ({len(content)} bytes)")
    return ExportResult.success(filename, content)
