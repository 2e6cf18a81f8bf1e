"""
categorical-axis: tick labels and tick locations for categorical chart axes.

Categories are laid out in equal cells across a centered tick band; labels
come from the category text, a locale-aware number formatter, or a date
formatter, depending on the axis type.
"""

__version__ = "0.1.0"

from categorical_axis.core.config import DEFAULTS, StyleConfig
from categorical_axis.core.errors import (
    CategoricalAxisError,
    InvalidInputError,
    MissingFormatPatternError,
)
from categorical_axis.core.types import AxisTicks, AxisType, ChartContext, Direction, Series
from categorical_axis.formatting import DateFormatter, NumberFormatter
from categorical_axis.ticks import CategoryTickCalculator, adjust_range, calculate_category_ticks

__all__ = [
    "AxisTicks",
    "AxisType",
    "CategoricalAxisError",
    "CategoryTickCalculator",
    "ChartContext",
    "DEFAULTS",
    "DateFormatter",
    "Direction",
    "InvalidInputError",
    "MissingFormatPatternError",
    "NumberFormatter",
    "Series",
    "StyleConfig",
    "adjust_range",
    "calculate_category_ticks",
    "__version__",
]
