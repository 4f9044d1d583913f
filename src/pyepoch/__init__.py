"""pyepoch - Convert between millisecond and second epoch timestamps."""

from __future__ import annotations

__version__ = "0.1.0"

from pyepoch._constants import (
    MAX_VALUE_INT,
    MAX_VALUE_LONG,
    MIN_VALUE_INT,
    MIN_VALUE_LONG,
    UNIX_EPOCH,
)
from pyepoch._converter import (
    from_epoch_timestamp,
    is_valid_epoch_timestamp,
    to_datetime,
    to_epoch_timestamp,
    to_long_epoch_time,
    to_timedelta,
    try_to_epoch_timestamp,
)
from pyepoch._errors import EpochError, EpochTimeValueError
from pyepoch.types import ConversionResult, LongEpochTime

__all__ = [
    "from_epoch_timestamp",
    "is_valid_epoch_timestamp",
    "to_datetime",
    "to_epoch_timestamp",
    "to_long_epoch_time",
    "to_timedelta",
    "try_to_epoch_timestamp",
    "ConversionResult",
    "LongEpochTime",
    "EpochError",
    "EpochTimeValueError",
    "MAX_VALUE_INT",
    "MAX_VALUE_LONG",
    "MIN_VALUE_INT",
    "MIN_VALUE_LONG",
    "UNIX_EPOCH",
]
