"""
Test the chart projection and tooltip ordering.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stackviz.dataset import Category, Dataset, Series, default_dataset
from stackviz.projector import LABEL_KEY, format_value, project, to_frame, tooltip_entries


@pytest.fixture
def abc():
    return Dataset(
        series=(Series("A", "#aa0000"), Series("B", "#00bb00"), Series("C", "#0000cc")),
        categories=(Category("X", (1, 2, 3)), Category("Y", (4, 5, 6))),
    )


class TestProject:

    def test_row_count_and_fields(self):
        dataset = default_dataset()
        rows = project(dataset)

        assert len(rows) == dataset.category_count
        for row in rows:
            assert len(row) == dataset.series_count + 1
            assert LABEL_KEY in row

    def test_row_contents(self, abc):
        assert project(abc) == [
            {"label": "X", "A": 1.0, "B": 2.0, "C": 3.0},
            {"label": "Y", "A": 4.0, "B": 5.0, "C": 6.0},
        ]

    def test_new_series_projects_zero(self, abc):
        rows = project(abc.add_series())
        assert all(row["Organism 4"] == 0 for row in rows)

    def test_series_named_label_keeps_category_label(self, abc):
        rows = project(abc.rename_series(0, LABEL_KEY))
        assert [row[LABEL_KEY] for row in rows] == ["X", "Y"]

    def test_empty(self):
        assert project(Dataset()) == []

    def test_deterministic(self, abc):
        assert project(abc) == project(abc)


class TestFrame:

    def test_frame_shape(self, abc):
        df = to_frame(abc)
        assert list(df.index) == ["X", "Y"]
        assert list(df.columns) == ["A", "B", "C"]
        assert df.loc["Y", "B"] == 5.0

    def test_duplicate_names_keep_own_columns(self, abc):
        df = to_frame(abc.rename_series(2, "A"))
        assert list(df.columns) == ["A", "B", "A"]
        assert list(df.iloc[0]) == [1.0, 2.0, 3.0]


class TestTooltip:

    def test_reverse_series_order(self, abc):
        entries = tooltip_entries(abc, 0)
        assert [e.name for e in entries] == ["C", "B", "A"]
        assert [e.value for e in entries] == [3.0, 2.0, 1.0]
        assert entries[0].color == "#0000cc"

    def test_second_category(self, abc):
        assert [e.value for e in tooltip_entries(abc, 1)] == [6.0, 5.0, 4.0]


class TestFormatValue:

    @pytest.mark.parametrize("value,text", [
        (25.0, "25"),
        (12.5, "12.5"),
        (0, "0"),
        (-3.25, "-3.25"),
        (12345.67, "12345.67"),
        (33.333333, "33.333333"),
        (1234567.5, "1234567.5"),
    ])
    def test_format(self, value, text):
        assert format_value(value) == text
