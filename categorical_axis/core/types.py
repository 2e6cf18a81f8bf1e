"""Axis, series and tick containers shared by the calculator and formatters."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Sequence

import numpy as np

from categorical_axis.core.config import StyleConfig


class AxisType(Enum):
    """Kind of value every category on an axis holds."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"


class Direction(Enum):
    """Orientation of an axis in the plot."""

    HORIZONTAL = "x"
    VERTICAL = "y"  # value axis of a bar chart, or the category axis of a rotated one


@dataclass
class Series:
    """A named series; x_data holds the categories it is plotted against."""

    name: str
    x_data: Sequence[Any]
    y_data: Sequence[Any] = ()


@dataclass
class ChartContext:
    """What the tick calculator reads from a chart.

    Series are kept in insertion order. The first inserted series supplies
    the categories; all others must carry identical category lists.
    """

    series: dict[str, Series] = field(default_factory=dict)
    x_axis_type: AxisType = AxisType.TEXT
    style: StyleConfig = field(default_factory=StyleConfig)

    def add_series(self, name: str, x_data: Sequence[Any], y_data: Sequence[Any] = ()) -> Series:
        """Create a series and register it under its name.

        Args:
            name: Series name, used as the mapping key
            x_data: Categories
            y_data: Values plotted against the categories

        Returns:
            The new Series
        """
        series = Series(name, x_data, y_data)
        self.series[name] = series
        return series


@dataclass
class AxisTicks:
    """Parallel tick labels and tick locations for one axis.

    Locations are pixel offsets from the working-space origin, in category order.
    """

    tick_labels: list[str]
    tick_locations: list[float]
    tick_space: int
    margin: float
    step: float
    min_value: float
    max_value: float

    def __len__(self) -> int:
        return len(self.tick_labels)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(zip(self.tick_labels, self.tick_locations))

    def pixel_locations(self) -> list[int]:
        """Tick locations truncated to whole pixels."""
        return np.trunc(np.asarray(self.tick_locations, dtype=float)).astype(int).tolist()
