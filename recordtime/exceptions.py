"""Exceptions for RecordTime.

Expected failures (bad date input, store errors) are returned as error values
from ``recordtime.errors``. The exceptions here signal programming errors and
broken preconditions.
"""

from typing import Any


class RecordTimeError(Exception):
    """Base exception for RecordTime."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResourceNotFound(RecordTimeError):
    """Raised or wrapped when a record does not exist."""


class UnwrapError(RecordTimeError):
    """Raised when unwrapping an Err result.

    The original error value is kept on ``error``.
    """

    def __init__(self, error: Any):
        super().__init__(getattr(error, "message", str(error)))
        self.error = error
