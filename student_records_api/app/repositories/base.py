"""
Storage contract for student records.

``RecordRepository`` names the operations the service layer relies on.
Concrete repositories (see ``sqlite_repository``) implement them over a
particular database.
"""

from __future__ import annotations

import abc
from typing import List, Optional

from student_records_api.app.schemas.record import Record


class RecordRepository(abc.ABC):
    """Abstract storage for ``Record`` objects."""

    @abc.abstractmethod
    def create(self, record: Record) -> Record:
        """Persist an unsaved record and return it with its new ``id``."""

    @abc.abstractmethod
    def save(self, record: Record) -> Optional[Record]:
        """Overwrite the stored fields of an already persisted record.

        Returns ``None`` when no record with ``record.id`` is stored.
        """

    @abc.abstractmethod
    def find_by_id(self, record_id: int) -> Optional[Record]:
        """Return the record with ``record_id`` or ``None``."""

    @abc.abstractmethod
    def find_all(self) -> List[Record]:
        """Return every stored record, ordered by ``id``."""

    @abc.abstractmethod
    def exists_by_id(self, record_id: int) -> bool:
        """Return ``True`` when a record with ``record_id`` is stored."""

    @abc.abstractmethod
    def delete_by_id(self, record_id: int) -> None:
        """Remove the record with ``record_id``; a no-op if absent."""
