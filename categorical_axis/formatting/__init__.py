"""Label formatters for numeric and date categories."""

from categorical_axis.formatting.date_formatter import (
    DateFormatter,
    from_epoch_millis,
    to_epoch_millis,
)
from categorical_axis.formatting.number_formatter import (
    NumberFormatter,
    get_format_pattern,
    to_decimal,
)

__all__ = [
    "DateFormatter",
    "NumberFormatter",
    "from_epoch_millis",
    "get_format_pattern",
    "to_decimal",
    "to_epoch_millis",
]
