"""
Test editor actions (the logic behind the Dash callbacks).
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stackviz.core.config import DatasetConfig
from stackviz.dataset import Category, Dataset, Series, default_dataset
from stackviz.ui.actions import (
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
from stackviz.ui.panels import create_tooltip


@pytest.fixture
def abc():
    return Dataset(
        series=(Series("A", "#aa0000"), Series("B", "#00bb00"), Series("C", "#0000cc")),
        categories=(Category("X", (1, 2, 3)), Category("Y", (4, 5, 6))),
    )


class TestApplyEdit:

    def test_add_series(self, abc):
        outcome = apply_edit(abc, ADD_SERIES, 1)
        assert outcome.changed
        assert outcome.dataset.series_count == 4
        assert outcome.status == "Added Organism 4"

    def test_add_series_uses_config(self, abc):
        config = DatasetConfig(palette=["#123456"], series_name_template="S{n}")
        outcome = apply_edit(abc, ADD_SERIES, 1, config)
        assert outcome.dataset.series[-1] == Series("S4", "#123456")

    def test_add_category(self, abc):
        outcome = apply_edit(abc, ADD_CATEGORY, 1)
        assert outcome.dataset.categories[-1].label == "Category 3"

    def test_remove_series(self, abc):
        outcome = apply_edit(abc, {"type": REMOVE_SERIES, "index": 0}, 1)
        assert [s.name for s in outcome.dataset.series] == ["B", "C"]
        assert outcome.status == "Removed A"

    def test_remove_ignores_fresh_buttons(self, abc):
        outcome = apply_edit(abc, {"type": REMOVE_SERIES, "index": 0}, None)
        assert not outcome.changed
        assert outcome.dataset is abc

    def test_remove_out_of_range_rejected(self, abc):
        outcome = apply_edit(abc, {"type": REMOVE_CATEGORY, "index": 7}, 1)
        assert not outcome.changed
        assert outcome.level == "danger"
        assert outcome.dataset is abc

    def test_rename_series(self, abc):
        outcome = apply_edit(abc, {"type": SERIES_NAME, "index": 1}, "Beta")
        assert outcome.changed
        assert outcome.dataset.series[1].name == "Beta"

    def test_rename_same_value_is_no_change(self, abc):
        outcome = apply_edit(abc, {"type": SERIES_NAME, "index": 1}, "B")
        assert not outcome.changed
        assert outcome.status is None

    def test_recolor(self, abc):
        outcome = apply_edit(abc, {"type": SERIES_COLOR, "index": 2}, "#ffffff")
        assert outcome.dataset.series[2].color == "#ffffff"

    def test_rename_category(self, abc):
        outcome = apply_edit(abc, {"type": CATEGORY_LABEL, "index": 0}, "Ward A")
        assert outcome.dataset.categories[0].label == "Ward A"

    def test_cell_value(self, abc):
        trigger = {"type": CELL_VALUE, "category": 1, "series": 0}
        outcome = apply_edit(abc, trigger, 12.5)
        assert outcome.changed
        assert outcome.dataset.categories[1].values[0] == 12.5
        assert outcome.status is None

    def test_cell_value_coercion_warns(self, abc):
        trigger = {"type": CELL_VALUE, "category": 0, "series": 0}
        outcome = apply_edit(abc, trigger, "abc")
        assert outcome.dataset.categories[0].values[0] == 0
        assert outcome.level == "warning"
        assert "not a number" in outcome.status

    def test_cell_value_cleared(self, abc):
        trigger = {"type": CELL_VALUE, "category": 0, "series": 1}
        outcome = apply_edit(abc, trigger, None)
        assert outcome.dataset.categories[0].values[1] == 0
        assert outcome.status == "Cleared value; stored 0"
        assert outcome.level == "warning"

    def test_empty_palette_is_reported(self, abc):
        config = DatasetConfig()
        config.palette = []
        outcome = apply_edit(abc, ADD_SERIES, 1, config)
        assert not outcome.changed
        assert outcome.level == "danger"
        assert outcome.dataset is abc

    def test_unknown_trigger(self, abc):
        assert not apply_edit(abc, None).changed
        assert not apply_edit(abc, {"type": "something-else"}).changed


class TestSessionHelpers:

    def test_load_dataset_roundtrip(self, abc):
        assert load_dataset(abc.to_dict(), default_dataset()) == abc

    def test_load_dataset_fallback(self):
        seed = default_dataset()
        assert load_dataset(None, seed) is seed
        assert load_dataset({"series": "broken"}, seed) is seed

    def test_hovered_category(self):
        hover = {"points": [{"curveNumber": 2, "pointIndex": 1, "x": "Y"}]}
        assert hovered_category(hover, 2) == 1
        assert hovered_category({"points": [{"pointNumber": 0}]}, 2) == 0
        assert hovered_category(hover, 1) is None
        assert hovered_category(None, 2) is None

    def test_tooltip_top_of_stack_first(self, abc):
        children = create_tooltip(abc, 0, "%")
        assert children[0].children == "X"
        assert [p.children for p in children[1:]] == ["C: 3%", "B: 2%", "A: 1%"]

    def test_tooltip_idle(self, abc):
        assert len(create_tooltip(abc, None)) == 1
