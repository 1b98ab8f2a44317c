"""RFC3339 timestamp conversion for record storage.

This module centralizes all transformations between Python datetime objects
and the RFC3339 strings the record store persists. Two layouts are accepted
on input:

    2025-03-28T12:30:45.000Z   ('T' separator)
    2025-03-28 12:30:45.000Z   (space separator, canonical storage form)

Only the space separated form is ever written. Datetimes have millisecond
resolution here; naive datetimes are read as UTC.

Expected failures are returned as ``Err`` values, never raised.
"""

import logging
from datetime import datetime, UTC

from ..errors import DateInvalidError, DateInvalidFormatError
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)


class InvalidDate:
    """Reserved date value produced from unparseable input.

    Use the ``INVALID_DATE`` singleton (or ``invalid_date()``) rather than
    instantiating this class.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "InvalidDate"


INVALID_DATE = InvalidDate()


def invalid_date() -> InvalidDate:
    """Return the reserved invalid date value."""
    return INVALID_DATE


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def is_valid(value: object) -> bool:
    """True if value is a datetime that can be expressed as a UTC instant."""
    if not isinstance(value, datetime):
        return False
    try:
        _as_utc(value)
    except OverflowError:
        return False
    return True


def _to_iso_string(dt: datetime) -> str:
    return _as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_parts(value: datetime | InvalidDate) -> Result[tuple[str, str], DateInvalidError]:
    """Split a datetime into its RFC3339 date part and time part.

    Returns:
        Ok(("2025-03-28", "12:30:45.000Z")) for a valid datetime,
        Err(DateInvalidError) otherwise.

    Raises:
        RuntimeError: If the serialized form has neither a 'T' nor a ' '
            separator. This cannot happen for a valid datetime.
    """
    if not is_valid(value):
        return Err(DateInvalidError(message="The provided date is invalid."))

    serialized = _to_iso_string(value)

    parts = serialized.split("T")
    if len(parts) != 2:
        parts = serialized.split(" ")

    if len(parts) != 2:
        raise RuntimeError(
            "Expected serialized date to contain a 'T' or ' ' separator."
        )

    return Ok((parts[0], parts[1]))


def to_canonical(value: datetime | InvalidDate) -> Result[str, DateInvalidError]:
    """Format a datetime as a space separated RFC3339 string.

    Example:
        >>> to_canonical(datetime(2025, 3, 28, 12, 30, 45, tzinfo=UTC))
        Ok(value='2025-03-28 12:30:45.000Z')
    """
    return to_parts(value).map(" ".join)


def normalize_separator(text: str) -> str:
    """Rewrite the first space to 'T' unless the string already has a 'T'."""
    if " " in text and "T" not in text:
        return text.replace(" ", "T", 1)
    return text


def parse(text: str) -> Result[datetime, DateInvalidFormatError]:
    """Parse an RFC3339 string (space or 'T' separated) into a UTC datetime.

    Sub-millisecond digits are dropped. The error message for an unparseable
    string quotes the input as given, before separator rewriting.
    """
    if not text:
        logger.debug("Rejected empty date string")
        return Err(DateInvalidFormatError(message="The provided date string is empty."))

    candidate = normalize_separator(text)

    try:
        dt = _as_utc(datetime.fromisoformat(candidate.replace("Z", "+00:00")))
    except (ValueError, OverflowError) as e:
        logger.debug(f"Rejected date string {text!r}: {e}")
        return Err(DateInvalidFormatError(
            message=f'The provided date string "{text}" is invalid.',
            cause=e,
        ))

    return Ok(dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000))


def normalize(text: str) -> Result[str, DateInvalidFormatError | DateInvalidError]:
    """Validate an RFC3339 string and return it in canonical form.

    Example:
        >>> normalize("2025-03-28T12:30:45.000Z")
        Ok(value='2025-03-28 12:30:45.000Z')
    """
    return parse(text).and_then(to_canonical)


def now() -> str:
    """Get current UTC timestamp in canonical form."""
    return to_canonical(datetime.now(UTC)).unwrap()
