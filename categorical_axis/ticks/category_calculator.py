"""Tick labels and tick locations for categorical axes.

Each category gets one cell of equal width inside the tick band, and its tick
sits at the cell center. The tick band is the configured percentage of the
working space, centered with equal margins at both ends.

Example usage:
    chart = ChartContext(x_axis_type=AxisType.TEXT, style=StyleConfig(axis_tick_space_percentage=1.0))
    chart.add_series("sales", ["A", "B", "C"], [3, 5, 2])
    ticks = calculate_category_ticks(Direction.HORIZONTAL, 300, 0.0, 0.0, chart)
    ticks.tick_locations  # [50.0, 150.0, 250.0]
"""

import math
from decimal import Decimal
from typing import Any, Callable, Optional, Protocol, Sequence

import numpy as np

from categorical_axis.core.errors import InvalidInputError
from categorical_axis.core.types import AxisTicks, AxisType, ChartContext, Direction
from categorical_axis.formatting.date_formatter import DateFormatter
from categorical_axis.formatting.number_formatter import NumberFormatter, to_decimal
from categorical_axis.ticks.range_adjuster import adjust_range


class NumberFormatting(Protocol):
    def format(self, value: Any, axis_min: float, axis_max: float, direction: Direction) -> str: ...


class DateFormatting(Protocol):
    def format(self, value: Any) -> str: ...


def get_tick_start_offset(working_space: float, tick_space: float) -> float:
    """Margin between the working-space edge and the tick band."""
    return (working_space - tick_space) / 2.0


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def _same_category(a: Any, b: Any) -> bool:
    # NaN matches NaN; otherwise Python equality, so 1 == 1.0
    if _is_nan(a) or _is_nan(b):
        return _is_nan(a) and _is_nan(b)
    return bool(a == b)


def _categories_equal(first: Sequence[Any], other: Sequence[Any]) -> bool:
    first = list(first)
    other = list(other)
    if len(first) != len(other):
        return False
    return all(_same_category(a, b) for a, b in zip(first, other))


class CategoryTickCalculator:
    """Computes tick labels and locations for an axis whose domain is a category list."""

    def __init__(
        self,
        direction: Direction,
        working_space: float,
        min_value: float,
        max_value: float,
        chart: ChartContext,
        number_formatter: Optional[NumberFormatting] = None,
        date_formatter: Optional[DateFormatting] = None,
    ):
        """Initialize calculator.

        Args:
            direction: Axis direction
            working_space: Pixel extent of the axis
            min_value: Observed minimum value on the axis
            max_value: Observed maximum value on the axis
            chart: Series map, x axis type and style configuration
            number_formatter: Replaces the NumberFormatter built from the style
            date_formatter: Replaces the DateFormatter built from the style
        """
        self.direction = direction
        self.working_space = working_space
        self.chart = chart
        self.style = chart.style
        self.number_formatter = number_formatter
        self.date_formatter = date_formatter

        self.observed_min = min_value
        self.observed_max = max_value
        # Display range, set by calculate()
        self.min_value = min_value
        self.max_value = max_value

    def get_categories(self) -> list[Any]:
        """Return the category list shared by all series.

        Raises:
            InvalidInputError: If there is no series, the categories are empty,
                or any series disagrees with the first one
        """
        if not self.chart.series:
            raise InvalidInputError("Category chart has no series")

        series_list = list(self.chart.series.values())
        first = series_list[0]
        categories = list(first.x_data)
        if not categories:
            raise InvalidInputError(f"Series '{first.name}' has no categories")

        for series in series_list[1:]:
            if not _categories_equal(categories, series.x_data):
                raise InvalidInputError(
                    f"X-Axis data of series '{series.name}' must exactly match "
                    f"the X-Axis data of series '{first.name}'"
                )
        return categories

    def _label_function(self) -> Callable[[Any], str]:
        axis_type = self.chart.x_axis_type

        if axis_type == AxisType.NUMBER:
            formatter = self.number_formatter or NumberFormatter(self.style)
            return lambda category: formatter.format(
                to_decimal(category), self.min_value, self.max_value, self.direction
            )
        if axis_type == AxisType.DATE:
            formatter = self.date_formatter or DateFormatter.from_style(self.style)
            return formatter.format
        return str

    def calculate(self) -> AxisTicks:
        """Compute one tick per category.

        Returns:
            AxisTicks with labels and cell-centered locations

        Raises:
            InvalidInputError: On invalid series or working space
            MissingFormatPatternError: For a date axis without a date pattern
        """
        if self.working_space <= 0:
            raise InvalidInputError(f"Working space must be positive, got {self.working_space}")

        # tick space - a percentage of the working space available for ticks
        percent = self.style.axis_tick_space_percentage
        tick_space = math.floor(percent * self.working_space)
        if tick_space < 1:
            raise InvalidInputError(
                f"Working space {self.working_space} at tick space percentage {percent} "
                f"leaves less than one pixel for ticks"
            )
        margin = get_tick_start_offset(self.working_space, tick_space)

        label_for = self._label_function()
        self.min_value, self.max_value = adjust_range(
            self.direction, self.observed_min, self.observed_max, self.style.y_axis_logarithmic
        )
        categories = self.get_categories()

        step = tick_space / len(categories)
        first_position = step / 2.0

        tick_labels = [label_for(category) for category in categories]
        tick_locations = margin + first_position + step * np.arange(len(categories))

        return AxisTicks(
            tick_labels=tick_labels,
            tick_locations=[float(x) for x in tick_locations],
            tick_space=tick_space,
            margin=margin,
            step=step,
            min_value=self.min_value,
            max_value=self.max_value,
        )


def calculate_category_ticks(
    direction: Direction,
    working_space: float,
    min_value: float,
    max_value: float,
    chart: ChartContext,
    number_formatter: Optional[NumberFormatting] = None,
    date_formatter: Optional[DateFormatting] = None,
) -> AxisTicks:
    """Compute tick labels and locations for a categorical axis.

    Args:
        direction: Axis direction
        working_space: Pixel extent of the axis
        min_value: Observed minimum value on the axis
        max_value: Observed maximum value on the axis
        chart: Series map, x axis type and style configuration
        number_formatter: Optional NumberFormatter replacement
        date_formatter: Optional DateFormatter replacement

    Returns:
        AxisTicks
    """
    calculator = CategoryTickCalculator(
        direction,
        working_space,
        min_value,
        max_value,
        chart,
        number_formatter=number_formatter,
        date_formatter=date_formatter,
    )
    return calculator.calculate()
