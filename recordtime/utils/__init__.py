"""Utility functions for RecordTime.

Import convention: use module-level imports for clarity.

    from recordtime.utils import rfc3339, uid
    stamp = rfc3339.now()
    result = rfc3339.normalize("2025-03-28T12:30:45.000Z")
    record_id = uid.generate_id()
"""

from . import rfc3339, uid

__all__ = ["rfc3339", "uid"]
