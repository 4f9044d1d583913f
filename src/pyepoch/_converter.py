"""Conversions from millisecond epoch timestamps.

A long epoch timestamp counts milliseconds since 1970-01-01T00:00:00Z and is
only range-checked when it is narrowed to a second-resolution epoch timestamp,
which must fit in a signed 32-bit integer.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from pyepoch._constants import (
    MAX_VALUE_INT,
    MILLISECONDS_PER_SECOND,
    MIN_VALUE_INT,
    UNIX_EPOCH,
)
from pyepoch._errors import EpochTimeValueError
from pyepoch.types import ConversionResult, LongEpochTime

__all__ = [
    "from_epoch_timestamp",
    "is_valid_epoch_timestamp",
    "to_datetime",
    "to_epoch_timestamp",
    "to_long_epoch_time",
    "to_timedelta",
    "try_to_epoch_timestamp",
]

logger = logging.getLogger(__name__)


def is_valid_epoch_timestamp(value: int) -> bool:
    """Return True if ``value`` lies within the second-resolution epoch range."""
    return MIN_VALUE_INT <= value <= MAX_VALUE_INT


def to_datetime(value: int) -> datetime:
    """Convert a millisecond timestamp to a UTC-aware datetime.

    Raises:
        OverflowError: If the result falls outside the range ``datetime``
            can represent.
    """
    return UNIX_EPOCH + timedelta(milliseconds=value)


def to_timedelta(value: int) -> timedelta:
    """Interpret a millisecond timestamp as an elapsed duration."""
    return timedelta(milliseconds=value)


def _to_seconds(value: int) -> int:
    # Truncate toward zero: -1500 ms is -1 s, not -2 s.
    seconds = abs(value) // MILLISECONDS_PER_SECOND
    return -seconds if value < 0 else seconds


def to_epoch_timestamp(value: int) -> int:
    """Narrow a millisecond timestamp to a second-resolution epoch timestamp.

    The sub-second remainder is discarded toward zero, so negative
    (pre-1970) timestamps round up rather than down.

    Args:
        value: Milliseconds since the Unix epoch.

    Returns:
        Seconds since the Unix epoch.

    Raises:
        EpochTimeValueError: If the seconds value does not fit in a signed
            32-bit integer. The error carries the original millisecond value.
    """
    seconds = _to_seconds(value)
    if is_valid_epoch_timestamp(seconds):
        return seconds

    logger.debug("rejecting %d ms: %d s is outside the epoch range", value, seconds)
    raise EpochTimeValueError(value)


def try_to_epoch_timestamp(value: int) -> ConversionResult:
    """Narrow a millisecond timestamp without raising.

    Returns:
        ConversionResult holding either the seconds value or the
        EpochTimeValueError that ``to_epoch_timestamp`` would have raised.
    """
    try:
        return ConversionResult(value=to_epoch_timestamp(value))
    except EpochTimeValueError as e:
        return ConversionResult(error=e)


def from_epoch_timestamp(seconds: int) -> int:
    """Widen a second-resolution epoch timestamp to milliseconds."""
    if not is_valid_epoch_timestamp(seconds):
        raise EpochTimeValueError(seconds)
    return seconds * MILLISECONDS_PER_SECOND


def to_long_epoch_time(value: int) -> LongEpochTime:
    """Wrap a millisecond timestamp in a LongEpochTime."""
    return LongEpochTime(value)
