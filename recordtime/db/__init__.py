"""Record store for RecordTime.

A Store owns one sqlite connection and gives access to record operations.
It is an explicit handle: create it with get_store() and pass it to whatever
needs it.

CONNECTION LIFECYCLE:
- atomic=False: every write commits immediately; call close() when done
- atomic=True: Store MUST be used as a context manager; commits on clean
  exit, rolls back on exception, closes the connection either way

    store = get_store()
    result = store.records.create("tasks", {"title": "Write", "due": due})
    store.close()

    with get_store(atomic=True) as store:
        store.records.create("tasks", {"title": "A"})
        store.records.create("tasks", {"title": "B"})

Record operations never raise for store failures; they return Err values
wrapping the sqlite exception (see recordtime.errors).
"""

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import settings
from ..schema import SCHEMA_PATH

if TYPE_CHECKING:
    from .records import RecordOperations

logger = logging.getLogger(__name__)


class Store:
    """Record store bound to a single sqlite connection."""

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Store with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Store MUST be used as context manager.
                    If False, each write commits on its own.
        """
        self._conn = connection
        self._atomic = atomic
        self._record_ops = None

    @property
    def records(self) -> "RecordOperations":
        """Record operations, created on first access."""
        if self._record_ops is None:
            from .records import RecordOperations
            self._record_ops = RecordOperations(self._conn, autocommit=not self._atomic)
        return self._record_ops

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "Store":
        if not self._atomic:
            raise RuntimeError(
                "Store must be created with atomic=True for context manager use. "
                "Use: with get_store(atomic=True) as store:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()


def _create_connection() -> sqlite3.Connection:
    """Create a fresh connection to settings.database_path."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def get_store(atomic: bool = False) -> Store:
    """Open a Store on the configured database.

    Args:
        atomic: If True, the Store must be used as a context manager so that
                all writes commit together.
    """
    return Store(_create_connection(), atomic=atomic)


def apply_schema(conn: sqlite3.Connection) -> None:
    """Run schema.sql on an open connection."""
    with open(SCHEMA_PATH, "r") as f:
        conn.executescript(f.read())
    conn.commit()


def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    try:
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            logger.debug(f"Database at {db_path} already initialized")
            return

        apply_schema(conn)
        logger.info(f"Database initialized at {db_path}")
    finally:
        conn.close()
