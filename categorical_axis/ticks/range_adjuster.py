"""Display range adjustment for category chart axes."""

import math

from categorical_axis.core.errors import InvalidInputError
from categorical_axis.core.types import Direction


def adjust_range(
    direction: Direction,
    min_value: float,
    max_value: float,
    y_axis_logarithmic: bool = False,
) -> tuple[float, float]:
    """Clamp an axis range for display.

    On a vertical (bar value) axis the range is stretched to include zero when
    all data share a sign, so bars grow from the baseline. With a logarithmic
    Y axis the minimum is lowered to the nearest power of ten at or below the
    original minimum. The range is not reordered or validated.

    Args:
        direction: Axis direction
        min_value: Observed minimum
        max_value: Observed maximum
        y_axis_logarithmic: Whether the Y axis uses a log scale

    Returns:
        Tuple of (min, max) for display

    Raises:
        InvalidInputError: If the log clamp is requested for a non-positive minimum
    """
    adjusted_min = min_value
    adjusted_max = max_value

    if direction == Direction.VERTICAL:
        if min_value > 0.0 and max_value > 0.0:
            adjusted_min = 0.0
        elif min_value < 0.0 and max_value < 0.0:
            adjusted_max = 0.0

    if y_axis_logarithmic:
        if min_value <= 0.0:
            raise InvalidInputError(
                f"Logarithmic Y axis needs a positive minimum, got {min_value}"
            )
        adjusted_min = 10.0 ** math.floor(math.log10(min_value))

    return adjusted_min, adjusted_max
