"""RecordTime: RFC3339 timestamps for record storage.

Converts between datetimes and the space separated RFC3339 strings a record
store persists, and reports failures as typed error values.

    from recordtime import Ok, Err
    from recordtime.utils import rfc3339

    match rfc3339.normalize("2025-03-28T12:30:45.000Z"):
        case Ok(value):
            print(value)  # 2025-03-28 12:30:45.000Z
        case Err(error):
            print(error.kind, error.message)
"""

from .result import Err, Ok, Result

__all__ = ["Ok", "Err", "Result"]
