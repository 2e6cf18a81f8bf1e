"""Formatting of date categories with a caller-supplied pattern, locale and time zone."""

from datetime import datetime, timedelta, timezone
from typing import Any

import numpy as np
import pandas as pd
from babel.core import Locale, UnknownLocaleError
from babel.dates import format_datetime, get_timezone

from categorical_axis.core.config import DEFAULTS, StyleConfig
from categorical_axis.core.errors import InvalidInputError, MissingFormatPatternError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Ticks per millisecond for each pandas Timestamp resolution
_TICKS_PER_MILLI = {"ns": 1_000_000, "us": 1_000, "ms": 1}


def to_epoch_millis(value: Any) -> int:
    """Convert a date category to milliseconds since the Unix epoch.

    Integers are taken as epoch milliseconds. Everything else goes through
    pd.Timestamp; naive values are interpreted as UTC. Sub-millisecond
    precision is dropped. Instants outside the nanosecond range of pandas
    (before 1677 or after 2262) keep their coarser resolution.

    Args:
        value: datetime, date, pd.Timestamp, np.datetime64, ISO string or int

    Returns:
        Epoch milliseconds

    Raises:
        InvalidInputError: If the value cannot be read as an instant
    """
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return int(value)
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Category {value!r} is not a date: {e}") from e
    if pd.isna(ts):
        raise InvalidInputError(f"Category {value!r} is not a date")
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")

    # asm8 is the UTC instant in the Timestamp's own resolution
    ticks = int(ts.asm8.view("i8"))
    if ts.unit == "s":
        return ticks * 1_000
    return ticks // _TICKS_PER_MILLI[ts.unit]


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        InvalidInputError: If the instant is outside the datetime range (years 1-9999)
    """
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise InvalidInputError(f"Epoch milliseconds {millis} are outside the supported date range") from e


class DateFormatter:
    """Formats instants with an LDML pattern (e.g. "yyyy-MM-dd HH:mm")."""

    def __init__(self, pattern: str, locale: str = DEFAULTS.LOCALE, time_zone: str = DEFAULTS.TIME_ZONE):
        """Initialize formatter.

        Args:
            pattern: LDML date pattern
            locale: Locale identifier for month and day names
            time_zone: IANA zone the instants are displayed in

        Raises:
            MissingFormatPatternError: If pattern is empty
            InvalidInputError: If the locale or time zone is unknown
        """
        if not pattern:
            raise MissingFormatPatternError("A date pattern must be set to format date axes")
        try:
            Locale.parse(locale)
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidInputError(f"Unknown locale {locale!r}") from e
        try:
            self._tzinfo = get_timezone(time_zone)
        except LookupError as e:
            raise InvalidInputError(f"Unknown time zone {time_zone!r}") from e

        self.pattern = pattern
        self.locale = locale
        self.time_zone = time_zone

    @classmethod
    def from_style(cls, style: StyleConfig) -> "DateFormatter":
        """Build a formatter from the date pattern, locale and zone of a StyleConfig."""
        if style.date_pattern is None:
            raise MissingFormatPatternError(
                "Date axes need a date pattern (StyleConfig.date_pattern, e.g. 'yyyy-MM-dd')"
            )
        return cls(style.date_pattern, style.locale, style.time_zone)

    def format(self, value: Any) -> str:
        """Format a date category.

        Args:
            value: Instant (see to_epoch_millis for accepted types)

        Returns:
            Formatted label in the configured zone
        """
        instant = from_epoch_millis(to_epoch_millis(value))
        return format_datetime(instant, format=self.pattern, tzinfo=self._tzinfo, locale=self.locale)
