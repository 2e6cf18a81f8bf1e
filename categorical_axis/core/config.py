"""Configuration constants and the style configuration read by the tick calculator."""

from dataclasses import dataclass, fields
from typing import Any, Optional

from categorical_axis.core.errors import InvalidInputError


# Default display settings
class DEFAULTS:
    """Default configuration values."""

    # Fraction of the working space used by the tick band
    AXIS_TICK_SPACE_PERCENTAGE = 0.95

    # Formatting
    LOCALE = "en_US"
    TIME_ZONE = "UTC"
    DATE_PATTERN = None  # Must be set for date axes

    # Number formatting: fixed notation while floor(log10(range)) is in this window
    SCIENTIFIC_MIN_PLACE = -4
    SCIENTIFIC_MAX_PLACE = 4
    SCIENTIFIC_PATTERN = "0.###E0"
    GROUPED_INTEGER_PATTERN = "#,##0"


@dataclass(frozen=True)
class StyleConfig:
    """Read-only style options consumed by the tick calculator and formatters."""

    axis_tick_space_percentage: float = DEFAULTS.AXIS_TICK_SPACE_PERCENTAGE
    y_axis_logarithmic: bool = False
    date_pattern: Optional[str] = DEFAULTS.DATE_PATTERN
    locale: str = DEFAULTS.LOCALE
    time_zone: str = DEFAULTS.TIME_ZONE
    decimal_pattern: Optional[str] = None
    x_axis_decimal_pattern: Optional[str] = None
    y_axis_decimal_pattern: Optional[str] = None

    def __post_init__(self):
        percent = self.axis_tick_space_percentage
        if not 0.0 < percent <= 1.0:
            raise InvalidInputError(
                f"axis_tick_space_percentage must be in (0, 1], got {percent}"
            )

    @classmethod
    def from_dict(cls, options: dict[str, Any]) -> "StyleConfig":
        """Build a StyleConfig from a plain mapping.

        Keys with a None value fall back to the defaults.

        Args:
            options: Mapping of StyleConfig field names to values

        Returns:
            New StyleConfig

        Raises:
            InvalidInputError: If a key is not a StyleConfig field
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidInputError(f"Unknown style option(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in options.items() if v is not None})
