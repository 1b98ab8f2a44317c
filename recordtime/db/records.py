"""Record operations.

IMPORT CONVENTION:
- Store accesses these through the store.records property
- NO direct import needed when using the Store API

Records are stored as JSON documents grouped by collection. Every record
gets a generated ID and canonical RFC3339 ``created``/``updated`` stamps.
Datetime field values are converted with rfc3339.to_canonical before they
are written, so the store only ever holds canonical timestamp strings.

Failures come back as Err values; the sqlite exception is kept as ``cause``.
"""

import json
import logging
import sqlite3
from datetime import datetime
from typing import Any

from ..errors import (
    CreateRecordError,
    DateInvalidError,
    DeleteRecordError,
    GetFullRecordListError,
)
from ..exceptions import ResourceNotFound
from ..result import Err, Ok, Result
from ..utils import rfc3339, uid

logger = logging.getLogger(__name__)

# Fields set by the store; values supplied for these are ignored.
SYSTEM_FIELDS = {"id", "collectionName", "created", "updated"}

SORT_ORDERS = {
    "created": "created ASC, rowid ASC",
    "-created": "created DESC, rowid DESC",
    "updated": "updated ASC, rowid ASC",
    "-updated": "updated DESC, rowid DESC",
}


class RecordOperations:
    """Create, delete and list records in a collection."""

    def __init__(self, conn: sqlite3.Connection, autocommit: bool = True):
        """Initialize record operations.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
            autocommit: Commit after each write. Store passes False when it
                        manages the transaction itself.
        """
        self._conn = conn
        self._autocommit = autocommit

    def _commit(self) -> None:
        if self._autocommit:
            self._conn.commit()

    def _serialize_fields(
        self,
        data: dict[str, Any]
    ) -> Result[dict[str, Any], DateInvalidError]:
        fields = {}
        for key, value in data.items():
            if key in SYSTEM_FIELDS:
                continue
            if isinstance(value, (datetime, rfc3339.InvalidDate)):
                stamp = rfc3339.to_canonical(value)
                if isinstance(stamp, Err):
                    return stamp
                value = stamp.value
            fields[key] = value
        return Ok(fields)

    def create(
        self,
        collection: str,
        data: dict[str, Any]
    ) -> Result[dict[str, Any], CreateRecordError | DateInvalidError]:
        """Create a record with an auto-generated ID.

        Args:
            collection: Collection name (e.g. 'tasks')
            data: Field values; datetimes are stored as canonical strings

        Returns:
            Ok with the stored record, Err(DateInvalidError) if a date field
            is invalid, Err(CreateRecordError) if the write failed.
        """
        serialized = self._serialize_fields(data)
        if isinstance(serialized, Err):
            return serialized
        fields = serialized.value

        now = rfc3339.now()

        # Retry on the (extremely rare) ID collision
        max_retries = 3
        for attempt in range(max_retries):
            record_id = uid.generate_id()
            try:
                self._conn.execute(
                    """INSERT INTO records (id, collection, data, created, updated)
                       VALUES (?, ?, ?, ?, ?)""",
                    (record_id, collection, json.dumps(fields), now, now)
                )
                self._commit()
                break
            except sqlite3.IntegrityError as e:
                if attempt < max_retries - 1:
                    continue
                return Err(self._create_error(collection, e))
            except (sqlite3.Error, TypeError, ValueError) as e:
                return Err(self._create_error(collection, e))

        return Ok(self._to_record(record_id, collection, fields, now, now))

    def _create_error(self, collection: str, error: Exception) -> CreateRecordError:
        logger.error(f"Failed to create record in '{collection}': {error}")
        return CreateRecordError(
            message=f"Failed to create record in '{collection}'.",
            cause=error,
        )

    def delete(self, collection: str, record_id: str) -> Result[None, DeleteRecordError]:
        """Delete a record by ID.

        A missing record is reported as DeleteRecordError whose cause is
        ResourceNotFound.
        """
        try:
            cursor = self._conn.execute(
                "DELETE FROM records WHERE id = ? AND collection = ?",
                (record_id, collection)
            )
            self._commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to delete record '{record_id}' from '{collection}': {e}")
            return Err(DeleteRecordError(
                message=f"Failed to delete record '{record_id}' from '{collection}'.",
                cause=e,
            ))

        if cursor.rowcount == 0:
            return Err(DeleteRecordError(
                message=f"Record '{record_id}' not found in '{collection}'.",
                cause=ResourceNotFound(
                    f"Record '{record_id}' not found",
                    {"collection": collection, "record_id": record_id}
                ),
            ))

        return Ok(None)

    def get_full_list(
        self,
        collection: str,
        sort: str = "-created"
    ) -> Result[list[dict[str, Any]], GetFullRecordListError]:
        """List every record in a collection.

        Args:
            collection: Collection name
            sort: One of 'created', '-created', 'updated', '-updated'
                  ('-' means newest first)
        """
        order_by = SORT_ORDERS.get(sort)
        if order_by is None:
            return Err(GetFullRecordListError(
                message=f"Unsupported sort '{sort}'.",
                cause=ValueError(f"sort must be one of {sorted(SORT_ORDERS)}"),
            ))

        try:
            rows = self._conn.execute(
                f"""SELECT id, collection, data, created, updated
                    FROM records
                    WHERE collection = ?
                    ORDER BY {order_by}""",
                (collection,)
            ).fetchall()
            records = [
                self._to_record(
                    row["id"], row["collection"], json.loads(row["data"]),
                    row["created"], row["updated"]
                )
                for row in rows
            ]
        except (sqlite3.Error, ValueError) as e:
            logger.error(f"Failed to list records in '{collection}': {e}")
            return Err(GetFullRecordListError(
                message=f"Failed to list records in '{collection}'.",
                cause=e,
            ))

        return Ok(records)

    @staticmethod
    def _to_record(
        record_id: str,
        collection: str,
        fields: dict[str, Any],
        created: str,
        updated: str
    ) -> dict[str, Any]:
        return {
            "id": record_id,
            "collectionName": collection,
            **fields,
            "created": created,
            "updated": updated,
        }
