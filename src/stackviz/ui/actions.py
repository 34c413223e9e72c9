"""
Editor actions: maps a triggering control to a Dataset mutation.

Kept free of Dash context so the callbacks stay thin and the logic can be
exercised directly.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..core.config import DatasetConfig
from ..core.logging import get_logger
from ..dataset import Dataset, DatasetError, DatasetIndexError, is_numeric, parse_value
from ..projector import format_value


# Component ids / pattern-matching types
ADD_SERIES = "add-series-btn"
ADD_CATEGORY = "add-category-btn"
REMOVE_SERIES = "remove-series"
REMOVE_CATEGORY = "remove-category"
SERIES_NAME = "series-name"
SERIES_COLOR = "series-color"
CATEGORY_LABEL = "category-label"
CELL_VALUE = "cell-value"

Trigger = Union[str, Mapping[str, Any], None]


@dataclass
class EditOutcome:
    """
    Result of applying one editor action.

    Attributes:
        dataset: Dataset after the action (unchanged on failure)
        changed: Whether the dataset differs from the input
        status: Message for the status indicator
        level: Bootstrap color of the status ("success", "warning", "danger")
    """
    dataset: Dataset
    changed: bool = False
    status: Optional[str] = None
    level: str = "success"


def apply_edit(
    dataset: Dataset,
    trigger: Trigger,
    value: Any = None,
    config: Optional[DatasetConfig] = None
) -> EditOutcome:
    """
    Apply the action identified by `trigger` to `dataset`.

    Args:
        dataset: Current dataset
        trigger: Component id that fired (plain id or pattern-matching dict)
        value: The fired property's new value (n_clicks or input value)
        config: Naming and palette for created entries

    Returns:
        EditOutcome; out-of-range indices yield a "danger" outcome with
        the dataset unchanged
    """
    config = config or DatasetConfig()
    logger = get_logger()

    try:
        if trigger == ADD_SERIES:
            new = dataset.add_series(config.palette, config.series_name_template)
            return EditOutcome(new, True, f"Added {new.series[-1].name}")

        if trigger == ADD_CATEGORY:
            new = dataset.add_category(config.category_label_template)
            return EditOutcome(new, True, f"Added {new.categories[-1].label}")

        if not isinstance(trigger, Mapping):
            return EditOutcome(dataset)

        kind = trigger.get("type")

        if kind == REMOVE_SERIES:
            # Freshly rendered buttons report n_clicks=None
            if not value:
                return EditOutcome(dataset)
            index = trigger.get("index")
            name = dataset.series[index].name if _in_range(index, dataset.series_count) else index
            return EditOutcome(dataset.remove_series(index), True, f"Removed {name}")

        if kind == REMOVE_CATEGORY:
            if not value:
                return EditOutcome(dataset)
            index = trigger.get("index")
            label = dataset.categories[index].label if _in_range(index, dataset.category_count) else index
            return EditOutcome(dataset.remove_category(index), True, f"Removed {label}")

        if kind == SERIES_NAME:
            return _changed(dataset, dataset.rename_series(trigger.get("index"), value or ""))

        if kind == SERIES_COLOR:
            if not value:
                return EditOutcome(dataset)
            return _changed(dataset, dataset.recolor_series(trigger.get("index"), value))

        if kind == CATEGORY_LABEL:
            return _changed(dataset, dataset.rename_category(trigger.get("index"), value or ""))

        if kind == CELL_VALUE:
            new = dataset.set_value(trigger.get("category"), trigger.get("series"), value)
            outcome = _changed(dataset, new)
            if value is None or (isinstance(value, str) and not value.strip()):
                outcome.status = "Cleared value; stored 0"
                outcome.level = "warning"
            elif not is_numeric(value):
                outcome.status = f"{value!r} is not a number; stored {format_value(parse_value(value))}"
                outcome.level = "warning"
            return outcome

    except DatasetIndexError as e:
        logger.warning(f"Rejected edit {trigger!r}: {e}")
        return EditOutcome(dataset, False, str(e), "danger")
    except DatasetError as e:
        logger.warning(f"Invalid edit {trigger!r}: {e}")
        return EditOutcome(dataset, False, str(e), "danger")

    return EditOutcome(dataset)


def _in_range(index: Any, size: int) -> bool:
    return isinstance(index, int) and 0 <= index < size


def _changed(old: Dataset, new: Dataset) -> EditOutcome:
    return EditOutcome(new, new != old)


def load_dataset(data: Optional[Dict[str, Any]], fallback: Dataset) -> Dataset:
    """Restore the session dataset, falling back when the store is empty or corrupt."""
    if not data:
        return fallback
    try:
        return Dataset.from_dict(data)
    except DatasetError as e:
        get_logger().warning(f"Discarding unreadable session dataset: {e}")
        return fallback


def hovered_category(hover_data: Optional[Dict[str, Any]], category_count: int) -> Optional[int]:
    """Category index under the pointer, from a Graph's hoverData."""
    if not hover_data or not hover_data.get("points"):
        return None
    point = hover_data["points"][0]
    index = point.get("pointIndex", point.get("pointNumber"))
    if not _in_range(index, category_count):
        return None
    return index
