"""Value types for epoch timestamp conversion."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from pyepoch._errors import EpochTimeValueError


@dataclass(frozen=True)
class LongEpochTime:
    """A millisecond-resolution epoch timestamp."""

    value: int = 0

    def to_datetime(self) -> datetime:
        """Convert to a UTC-aware datetime."""
        from pyepoch._converter import to_datetime

        return to_datetime(self.value)

    def to_timedelta(self) -> timedelta:
        """Interpret the value as an elapsed duration."""
        from pyepoch._converter import to_timedelta

        return to_timedelta(self.value)

    def to_epoch_timestamp(self) -> int:
        """Narrow to seconds, raising EpochTimeValueError if out of range."""
        from pyepoch._converter import to_epoch_timestamp

        return to_epoch_timestamp(self.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a non-raising narrowing conversion.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: int | None = None
    error: EpochTimeValueError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("ConversionResult requires exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """Return the converted value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
