"""Core modules for categorical-axis: configuration, errors, and shared types."""

from categorical_axis.core.config import DEFAULTS, StyleConfig
from categorical_axis.core.errors import (
    CategoricalAxisError,
    InvalidInputError,
    MissingFormatPatternError,
)
from categorical_axis.core.types import AxisTicks, AxisType, ChartContext, Direction, Series

__all__ = [
    "DEFAULTS",
    "StyleConfig",
    "CategoricalAxisError",
    "InvalidInputError",
    "MissingFormatPatternError",
    "AxisTicks",
    "AxisType",
    "ChartContext",
    "Direction",
    "Series",
]
