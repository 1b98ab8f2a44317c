"""Tagged error values.

Every error value has a ``kind`` discriminant, a human readable ``message``
and an optional ``cause`` holding the inner exception for diagnostics. They
are returned inside ``Err`` rather than raised.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ErrorValue(BaseModel):
    """Base error value."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str
    message: str
    cause: Exception | None = None


class DateInvalidError(ErrorValue):
    """A date value failed its validity check."""

    kind: Literal["dateInvalid"] = "dateInvalid"


class DateInvalidFormatError(ErrorValue):
    """A date string could not be parsed."""

    kind: Literal["dateInvalidFormat"] = "dateInvalidFormat"


# Record store errors wrap the store's own exception as ``cause``.

class CreateRecordError(ErrorValue):
    kind: Literal["createRecord"] = "createRecord"


class DeleteRecordError(ErrorValue):
    kind: Literal["deleteRecord"] = "deleteRecord"


class GetFullRecordListError(ErrorValue):
    kind: Literal["getFullRecordList"] = "getFullRecordList"


DateError = DateInvalidError | DateInvalidFormatError
RecordError = CreateRecordError | DeleteRecordError | GetFullRecordListError

__all__ = [
    "ErrorValue",
    "DateInvalidError",
    "DateInvalidFormatError",
    "CreateRecordError",
    "DeleteRecordError",
    "GetFullRecordListError",
    "DateError",
    "RecordError",
]
