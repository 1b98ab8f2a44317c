"""Result channel for error-as-value control flow.

Functions that can fail in an expected way return ``Ok(value)`` or
``Err(error)`` instead of raising. Both are frozen dataclasses, so callers can
pattern match:

    match rfc3339.normalize(text):
        case Ok(value):
            ...
        case Err(error):
            logger.warning(error.message)

``map`` and ``and_then`` chain steps and stop at the first ``Err``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .exceptions import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self

    def unwrap(self):
        """Raise UnwrapError wrapping the error value."""
        raise UnwrapError(self.error)


Result = Union[Ok[T], Err[E]]
