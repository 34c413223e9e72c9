"""
Test the stacked chart figure.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stackviz.core.config import ChartConfig
from stackviz.dataset import default_dataset
from stackviz.figures import ChartKind, build_figure, chart_spec
from stackviz.dataset import Category, Dataset, Series
from stackviz.figures.stacked import FALLBACK_COLOR, TRANSPARENT, display_color, plain_text


@pytest.fixture
def dataset():
    return default_dataset()


class TestChartSpec:

    def test_descriptors_follow_series(self, dataset):
        spec = chart_spec(dataset, "bar", "Title", "Y")
        assert [d.key for d in spec.series] == [s.name for s in dataset.series]
        assert [d.color for d in spec.series] == [s.color for s in dataset.series]
        assert spec.labels == ("Category 1", "Category 2", "Category 3", "Category 4")

    def test_series_named_label(self, dataset):
        spec = chart_spec(dataset.rename_series(0, "label"))
        assert spec.labels[0] == "Category 1"

        fig = build_figure(spec)
        assert list(fig.data[0].x) == ["Category 1", "Category 2", "Category 3", "Category 4"]
        assert list(fig.data[0].y) == [25, 22, 20, 18]

    def test_duplicate_names_keep_own_values(self):
        ds = Dataset(
            series=(Series("A", "#ff0000"), Series("A", "#00ff00")),
            categories=(Category("X", (1, 2)),),
        )
        fig = build_figure(chart_spec(ds))
        assert [list(trace.y) for trace in fig.data] == [[1], [2]]

    @pytest.mark.parametrize("raw,kind", [
        ("bar", ChartKind.BAR),
        ("area", ChartKind.AREA),
        (ChartKind.AREA, ChartKind.AREA),
        (None, ChartKind.BAR),
        ("pie", ChartKind.BAR),
    ])
    def test_kind_parsing(self, dataset, raw, kind):
        assert chart_spec(dataset, raw).kind == kind


class TestBuildFigure:

    def test_bar_traces(self, dataset):
        fig = build_figure(chart_spec(dataset, "bar", "My Chart", "Percent"))

        assert len(fig.data) == dataset.series_count
        assert all(trace.type == "bar" for trace in fig.data)
        assert fig.layout.barmode == "stack"
        assert fig.data[0].name == "E. coli"
        assert fig.data[0].marker.color == "#808080"
        assert list(fig.data[0].y) == [25, 22, 20, 18]
        assert fig.layout.title.text == "My Chart"
        assert fig.layout.yaxis.title.text == "Percent"

    def test_area_traces(self, dataset):
        fig = build_figure(chart_spec(dataset, "area"), ChartConfig(fill_opacity=0.5))

        assert all(trace.type == "scatter" for trace in fig.data)
        assert all(trace.stackgroup == "1" for trace in fig.data)
        assert fig.data[0].fillcolor == "rgba(128, 128, 128, 0.5)"

    def test_builtin_hover_suppressed(self, dataset):
        fig = build_figure(chart_spec(dataset))
        assert all(trace.hoverinfo == "none" for trace in fig.data)

    def test_short_hex_and_names_get_fill_opacity(self):
        ds = Dataset(
            series=(Series("A", "#f00"), Series("B", "blue")),
            categories=(Category("X", (1, 2)),),
        )
        fig = build_figure(chart_spec(ds, "area"), ChartConfig(fill_opacity=0.5))
        assert fig.data[0].fillcolor == "rgba(255, 0, 0, 0.5)"
        assert fig.data[1].fillcolor == "rgba(0, 0, 255, 0.5)"

    def test_user_text_is_escaped(self):
        ds = Dataset(
            series=(Series("Cost $5 <b>", "#ff0000"),),
            categories=(Category("a&b", (1,)),),
        )
        fig = build_figure(chart_spec(ds, "bar", "$x$ report", "<i>y</i>"))
        assert fig.data[0].name == "Cost &#36;5 &lt;b&gt;"
        assert list(fig.data[0].x) == ["a&amp;b"]
        assert fig.layout.title.text == "&#36;x&#36; report"
        assert fig.layout.yaxis.title.text == "&lt;i&gt;y&lt;/i&gt;"

    def test_page_background_transparent(self, dataset):
        assert build_figure(chart_spec(dataset)).layout.paper_bgcolor == TRANSPARENT

    def test_size_from_config(self, dataset):
        fig = build_figure(chart_spec(dataset), ChartConfig(width=640, height=320))
        assert fig.layout.width == 640
        assert fig.layout.height == 320

    def test_empty_dataset(self):
        fig = build_figure(chart_spec(Dataset()))
        assert len(fig.data) == 0


class TestPlainText:

    @pytest.mark.parametrize("text,escaped", [
        ("E. coli", "E. coli"),
        ("$5 and $10", "&#36;5 and &#36;10"),
        ("a<br>b", "a&lt;br&gt;b"),
        ("", ""),
    ])
    def test_escape(self, text, escaped):
        assert plain_text(text) == escaped


class TestDisplayColor:

    @pytest.mark.parametrize("color", ["#4169E1", "#abc", "red", "skyblue"])
    def test_valid_colors_kept(self, color):
        assert display_color(color) == color

    @pytest.mark.parametrize("color", ["", "4169E1", "#12", "b", "none", "tab:blue", "not-a-color"])
    def test_invalid_colors_fall_back(self, color):
        assert display_color(color) == FALLBACK_COLOR

    def test_figure_survives_bad_color(self, dataset):
        fig = build_figure(chart_spec(dataset.recolor_series(0, "zzz")))
        assert fig.data[0].marker.color == FALLBACK_COLOR
