"""Schema module for RecordTime.

Holds schema.sql, the source of truth for the record store layout.
"""

from pathlib import Path

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

__all__ = ["SCHEMA_PATH"]
