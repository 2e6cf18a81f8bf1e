"""Tick computation for categorical axes."""

from categorical_axis.ticks.category_calculator import (
    CategoryTickCalculator,
    DateFormatting,
    NumberFormatting,
    calculate_category_ticks,
    get_tick_start_offset,
)
from categorical_axis.ticks.range_adjuster import adjust_range

__all__ = [
    "CategoryTickCalculator",
    "DateFormatting",
    "NumberFormatting",
    "adjust_range",
    "calculate_category_ticks",
    "get_tick_start_offset",
]
