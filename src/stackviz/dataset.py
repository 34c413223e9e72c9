"""
Dataset Store: series definitions and per-category values.

A Dataset owns two positionally aligned collections:
- series: ordered (name, color) definitions
- categories: labeled rows holding one value per series

Every mutation returns a new Dataset, so the editor can detect changes by
value and no caller can update one collection without the other.
"""

import math
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Sequence, Tuple


DEFAULT_PALETTE = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A", "#98D8C8",
    "#F7DC6F", "#BB8FCE", "#85C1E2", "#F8B739", "#52B788",
)

# Leading decimal literal, the same prefix a browser number parser accepts
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class DatasetError(ValueError):
    """Raised for malformed datasets."""


class DatasetIndexError(DatasetError, IndexError):
    """Raised when a series or category index is out of range."""


def parse_value(raw: Any) -> float:
    """
    Coerce user input to a float.

    Non-numeric input falls back to 0.0 rather than being rejected.

    Args:
        raw: Value typed into the editor (str, number or None)

    Returns:
        Parsed value
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else 0.0

    match = _NUMBER_PREFIX.match(str(raw))
    if match is None:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def is_numeric(raw: Any) -> bool:
    """Check whether raw input is a complete, finite number."""
    if raw is None or isinstance(raw, bool):
        return False
    if isinstance(raw, (int, float)):
        return math.isfinite(raw)

    text = str(raw).strip()
    match = _NUMBER_PREFIX.match(text)
    return match is not None and match.end() == len(text) and math.isfinite(float(text))


@dataclass(frozen=True)
class Series:
    """A stacked series (organism) drawn in one color."""
    name: str
    color: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "color": self.color}


@dataclass(frozen=True)
class Category:
    """A labeled row holding one value per series."""
    label: str
    values: Tuple[float, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "values": list(self.values)}


@dataclass(frozen=True)
class Dataset:
    """
    Series list plus category rows, kept positionally aligned.

    Attributes:
        series: Ordered series definitions
        categories: Ordered categories; values[i] belongs to series[i]
    """
    series: Tuple[Series, ...] = ()
    categories: Tuple[Category, ...] = ()

    def __post_init__(self):
        # Normalize lists to tuples so snapshots never share mutable state
        object.__setattr__(self, "series", tuple(self.series))
        object.__setattr__(self, "categories", tuple(
            replace(cat, values=tuple(float(v) for v in cat.values))
            for cat in self.categories
        ))

        width = len(self.series)
        for cat in self.categories:
            if len(cat.values) != width:
                raise DatasetError(
                    f"Category {cat.label!r} has {len(cat.values)} values "
                    f"but there are {width} series"
                )

    @property
    def series_count(self) -> int:
        return len(self.series)

    @property
    def category_count(self) -> int:
        return len(self.categories)

    # Index guards

    def _check_series_index(self, index: int) -> int:
        if not isinstance(index, int) or not 0 <= index < len(self.series):
            raise DatasetIndexError(
                f"Series index {index!r} out of range (0..{len(self.series) - 1})"
            )
        return index

    def _check_category_index(self, index: int) -> int:
        if not isinstance(index, int) or not 0 <= index < len(self.categories):
            raise DatasetIndexError(
                f"Category index {index!r} out of range (0..{len(self.categories) - 1})"
            )
        return index

    # Series mutations

    def add_series(
        self,
        palette: Sequence[str] = DEFAULT_PALETTE,
        name_template: str = "Organism {n}"
    ) -> "Dataset":
        """
        Append a series and a trailing zero to every category.

        Args:
            palette: Colors assigned round-robin by series count
            name_template: Name pattern, formatted with n = new series count

        Returns:
            New Dataset

        Raises:
            DatasetError: If the palette is empty
        """
        if not palette:
            raise DatasetError("palette has no colors to assign")
        count = len(self.series)
        series = Series(
            name=name_template.format(n=count + 1),
            color=palette[count % len(palette)],
        )
        return Dataset(
            series=self.series + (series,),
            categories=tuple(
                replace(cat, values=cat.values + (0.0,)) for cat in self.categories
            ),
        )

    def remove_series(self, index: int) -> "Dataset":
        """Remove a series and its value column from every category."""
        self._check_series_index(index)
        return Dataset(
            series=self.series[:index] + self.series[index + 1:],
            categories=tuple(
                replace(cat, values=cat.values[:index] + cat.values[index + 1:])
                for cat in self.categories
            ),
        )

    def rename_series(self, index: int, name: str) -> "Dataset":
        self._check_series_index(index)
        series = list(self.series)
        series[index] = replace(series[index], name=name)
        return replace(self, series=tuple(series))

    def recolor_series(self, index: int, color: str) -> "Dataset":
        self._check_series_index(index)
        series = list(self.series)
        series[index] = replace(series[index], color=color)
        return replace(self, series=tuple(series))

    # Category mutations

    def add_category(self, label_template: str = "Category {n}") -> "Dataset":
        """Append a category with a zero for every series."""
        category = Category(
            label=label_template.format(n=len(self.categories) + 1),
            values=(0.0,) * len(self.series),
        )
        return replace(self, categories=self.categories + (category,))

    def remove_category(self, index: int) -> "Dataset":
        self._check_category_index(index)
        return replace(
            self,
            categories=self.categories[:index] + self.categories[index + 1:],
        )

    def rename_category(self, index: int, label: str) -> "Dataset":
        self._check_category_index(index)
        categories = list(self.categories)
        categories[index] = replace(categories[index], label=label)
        return replace(self, categories=tuple(categories))

    def set_value(self, category_index: int, series_index: int, raw: Any) -> "Dataset":
        """
        Store a value for one (category, series) cell.

        Args:
            category_index: Category position
            series_index: Series position
            raw: User input; non-numeric input is stored as 0

        Returns:
            New Dataset
        """
        self._check_category_index(category_index)
        self._check_series_index(series_index)

        category = self.categories[category_index]
        values = list(category.values)
        values[series_index] = parse_value(raw)

        categories = list(self.categories)
        categories[category_index] = replace(category, values=tuple(values))
        return replace(self, categories=tuple(categories))

    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        """Export to a JSON-compatible dictionary (used by the session store)."""
        return {
            "series": [s.to_dict() for s in self.series],
            "categories": [c.to_dict() for c in self.categories],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dataset":
        """
        Load from a dictionary produced by to_dict().

        Raises:
            DatasetError: If the payload is malformed or misaligned
        """
        try:
            series = tuple(
                Series(name=str(s["name"]), color=str(s["color"]))
                for s in data["series"]
            )
            categories = tuple(
                Category(label=str(c["label"]), values=tuple(parse_value(v) for v in c["values"]))
                for c in data["categories"]
            )
        except (KeyError, TypeError) as e:
            raise DatasetError(f"Malformed dataset payload: {e}") from e

        return cls(series=series, categories=categories)


def default_dataset() -> Dataset:
    """Seed dataset: 10 organisms across 4 categories."""
    series = (
        Series("E. coli", "#808080"),
        Series("CONS", "#87CEEB"),
        Series("S. aureus", "#FF6B9D"),
        Series("Streptococcus spp.", "#CD5C5C"),
        Series("Klebsiella spp.", "#90EE90"),
        Series("Enterococcus spp.", "#4169E1"),
        Series("Pseudomonas spp.", "#DDA0DD"),
        Series("Candida spp.", "#FFD700"),
        Series("Enterobacter spp.", "#FF8C00"),
        Series("Others", "#FFA07A"),
    )
    categories = (
        Category("Category 1", (25, 15, 12, 10, 10, 8, 6, 5, 6, 3)),
        Category("Category 2", (22, 18, 13, 11, 11, 9, 5, 5, 4, 2)),
        Category("Category 3", (20, 20, 12, 10, 12, 10, 6, 5, 4, 1)),
        Category("Category 4", (18, 22, 11, 9, 13, 11, 6, 5, 4, 1)),
    )
    return Dataset(series=series, categories=categories)
