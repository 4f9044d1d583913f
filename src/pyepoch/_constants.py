"""Epoch origin and range constants for timestamp conversion."""

from datetime import datetime, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""The zero point of every epoch timestamp, 1970-01-01T00:00:00Z."""

MIN_VALUE_INT = -(2**31)
"""Smallest valid second-resolution epoch timestamp (signed 32-bit minimum)."""

MAX_VALUE_INT = 2**31 - 1
"""Largest valid second-resolution epoch timestamp (signed 32-bit maximum)."""

MIN_VALUE_LONG = -(2**63)
"""Smallest millisecond-resolution epoch timestamp (signed 64-bit minimum)."""

MAX_VALUE_LONG = 2**63 - 1
"""Largest millisecond-resolution epoch timestamp (signed 64-bit maximum)."""

MILLISECONDS_PER_SECOND = 1000
