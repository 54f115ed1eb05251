"""
SQLite implementation of the record storage contract.

Each operation opens its own connection through ``core.db.get_cursor``
and closes it before returning, so no connection is shared between
requests.  All queries use parameterized statements.  Any
``sqlite3.Error`` is logged and re-raised as ``StorageError``.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from student_records_api.app.core.db import get_cursor, get_database_path
from student_records_api.app.core.exceptions import StorageError
from student_records_api.app.repositories.base import RecordRepository
from student_records_api.app.schemas.record import Record

logger = logging.getLogger(__name__)


class SQLiteRecordRepository(RecordRepository):
    """Stores records in the ``records`` table of a SQLite database."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.error("Database error on %s: %s", self.db_path, exc)
            raise StorageError(str(exc)) from exc

    def create(self, record: Record) -> Record:
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO records (name, email, department) VALUES (?, ?, ?)",
                (record.name, record.email, record.department),
            )
            record_id = cursor.lastrowid
        return record.model_copy(update={"id": record_id})

    def save(self, record: Record) -> Optional[Record]:
        with self._cursor() as cursor:
            cursor.execute(
                "UPDATE records SET name = ?, email = ?, department = ? WHERE id = ?",
                (record.name, record.email, record.department, record.id),
            )
            updated = cursor.rowcount
        if not updated:
            return None
        return record

    def find_by_id(self, record_id: int) -> Optional[Record]:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, email, department FROM records WHERE id = ?",
                (record_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_record(row)

    def find_all(self) -> List[Record]:
        with self._cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, name, email, department FROM records ORDER BY id ASC"
            ).fetchall()
        return [self._row_to_record(row) for row in rows]

    def exists_by_id(self, record_id: int) -> bool:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT 1 FROM records WHERE id = ?", (record_id,)
            ).fetchone()
        return row is not None

    def delete_by_id(self, record_id: int) -> None:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM records WHERE id = ?", (record_id,))

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> Record:
        """Convert a database row to a ``Record``."""
        return Record(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            department=row["department"],
        )
