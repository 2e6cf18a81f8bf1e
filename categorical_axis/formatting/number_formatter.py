"""Locale-aware formatting of numeric category labels."""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

from categorical_axis.core.config import DEFAULTS, StyleConfig
from categorical_axis.core.errors import InvalidInputError
from categorical_axis.core.types import Direction


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric category to a Decimal through its string form.

    Args:
        value: int, float, Decimal, numpy scalar or numeric string

    Returns:
        Decimal with the same digits as str(value)

    Raises:
        InvalidInputError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidInputError(f"Category {value!r} is not a number") from None


def get_format_pattern(axis_min: float, axis_max: float) -> str:
    """Select a decimal pattern from the axis range.

    Ranges whose order of magnitude lies within the fixed-notation window get
    a grouped fixed-point pattern with enough decimals to tell neighbouring
    ticks apart; anything larger or smaller goes scientific.

    Args:
        axis_min: Minimum value of the axis
        axis_max: Maximum value of the axis

    Returns:
        LDML number pattern (e.g. "#,##0.0" or "0.###E0")
    """
    difference = abs(axis_max - axis_min)
    place_of_difference = 0 if difference == 0 else math.floor(math.log10(difference))

    if not DEFAULTS.SCIENTIFIC_MIN_PLACE <= place_of_difference <= DEFAULTS.SCIENTIFIC_MAX_PLACE:
        return DEFAULTS.SCIENTIFIC_PATTERN

    decimals = max(0, 1 - place_of_difference)
    if decimals == 0:
        return DEFAULTS.GROUPED_INTEGER_PATTERN
    return DEFAULTS.GROUPED_INTEGER_PATTERN + "." + "0" * decimals


class NumberFormatter:
    """Formats numeric categories so all labels on one axis share a style."""

    def __init__(self, style: StyleConfig):
        """Initialize formatter.

        Args:
            style: StyleConfig providing locale and decimal patterns
        """
        self.style = style

    def pattern_for(self, axis_min: float, axis_max: float, direction: Direction) -> str:
        """Return the pattern used for every label on this axis."""
        pattern: Optional[str] = None
        if direction == Direction.HORIZONTAL:
            pattern = self.style.x_axis_decimal_pattern
        elif direction == Direction.VERTICAL:
            pattern = self.style.y_axis_decimal_pattern
        if pattern is None:
            pattern = self.style.decimal_pattern
        if pattern is None:
            pattern = get_format_pattern(axis_min, axis_max)
        return pattern

    def format(self, value: Any, axis_min: float, axis_max: float, direction: Direction) -> str:
        """Format a numeric category.

        Args:
            value: Category value (converted to Decimal)
            axis_min: Adjusted minimum of the axis
            axis_max: Adjusted maximum of the axis
            direction: Axis direction, selects the per-axis pattern override

        Returns:
            Formatted label
        """
        number = to_decimal(value)
        pattern = self.pattern_for(axis_min, axis_max, direction)
        try:
            return format_decimal(number, format=pattern, locale=self.style.locale)
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidInputError(
                f"Cannot format {value!r} with pattern {pattern!r} and locale {self.style.locale!r}: {e}"
            ) from e
