"""Exception hierarchy for epoch timestamp conversion."""

from __future__ import annotations

from pyepoch._constants import MAX_VALUE_INT, MIN_VALUE_INT


class EpochError(Exception):
    """Base exception for epoch timestamp errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class EpochTimeValueError(EpochError):
    """Raised when a timestamp cannot be represented as a second-resolution epoch timestamp."""

    def __init__(self, value: int) -> None:
        super().__init__(
            ERR_MSG_EPOCH_OUT_OF_RANGE,
            f"value {value} cannot be represented as an epoch timestamp "
            f"within [{MIN_VALUE_INT}, {MAX_VALUE_INT}] seconds",
        )
        self.value = value


# Sanitized user-facing error message constants
ERR_MSG_EPOCH_OUT_OF_RANGE = "timestamp outside of the valid epoch range"
