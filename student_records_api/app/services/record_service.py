"""
Service layer for student records.

``RecordService`` holds the two business rules of the application:

* update overwrites ``name``, ``email`` and ``department`` of an
  existing record and never creates one (no upsert);
* delete checks existence first and reports whether anything was
  removed.

Everything else passes straight through to the injected
``RecordRepository``.  Not-found outcomes are returned as ``None`` or
``False``.  Storage failures propagate as ``StorageError``.

Methods are synchronous and block on the repository; the API layer
calls them from FastAPI's threadpool.  Concurrent updates of the same
record are not coordinated: the last write wins.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from student_records_api.app.repositories.base import RecordRepository
from student_records_api.app.schemas.record import Record

logger = logging.getLogger(__name__)


class RecordService:
    """Business logic for student records."""

    def __init__(self, repository: RecordRepository) -> None:
        self.repository = repository

    def create(self, record: Record) -> Record:
        """Persist a new record and return it with its assigned ``id``.

        Any ``id`` supplied by the caller is discarded.
        """
        created = self.repository.create(record.model_copy(update={"id": None}))
        logger.info("Created record %s", created.id)
        return created

    def get_by_id(self, record_id: int) -> Optional[Record]:
        return self.repository.find_by_id(record_id)

    def list_all(self) -> List[Record]:
        return self.repository.find_all()

    def update(self, record_id: int, patch: Record) -> Optional[Record]:
        """Replace the mutable fields of record ``record_id`` with ``patch``.

        ``patch`` is a full replacement: a field it leaves unset is
        stored as ``None``.  The stored ``id`` is kept regardless of
        ``patch.id``.  Returns the updated record, or ``None`` if no
        record with ``record_id`` exists.
        """
        existing = self.repository.find_by_id(record_id)
        if existing is None:
            return None
        updated = existing.model_copy(
            update={
                "name": patch.name,
                "email": patch.email,
                "department": patch.department,
            }
        )
        saved = self.repository.save(updated)
        if saved is None:
            # Removed between the lookup and the write.
            return None
        logger.info("Updated record %s", record_id)
        return saved

    def delete(self, record_id: int) -> bool:
        """Delete record ``record_id``.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        if not self.repository.exists_by_id(record_id):
            return False
        self.repository.delete_by_id(record_id)
        logger.info("Deleted record %s", record_id)
        return True
