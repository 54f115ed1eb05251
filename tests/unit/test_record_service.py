from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from student_records_api.app.repositories import RecordRepository, SQLiteRecordRepository
from student_records_api.app.schemas.record import Record
from student_records_api.app.services.record_service import RecordService


class InMemoryRecordRepository(RecordRepository):
    """Dict-backed repository that also records which operations ran."""

    def __init__(self) -> None:
        self.rows: Dict[int, Record] = {}
        self.calls: List[str] = []
        self._next_id = 1

    def create(self, record: Record) -> Record:
        self.calls.append("create")
        saved = record.model_copy(update={"id": self._next_id})
        self.rows[saved.id] = saved
        self._next_id += 1
        return saved

    def save(self, record: Record) -> Optional[Record]:
        self.calls.append("save")
        if record.id not in self.rows:
            return None
        self.rows[record.id] = record
        return record

    def find_by_id(self, record_id: int) -> Optional[Record]:
        self.calls.append("find_by_id")
        return self.rows.get(record_id)

    def find_all(self) -> List[Record]:
        self.calls.append("find_all")
        return [self.rows[k] for k in sorted(self.rows)]

    def exists_by_id(self, record_id: int) -> bool:
        self.calls.append("exists_by_id")
        return record_id in self.rows

    def delete_by_id(self, record_id: int) -> None:
        self.calls.append("delete_by_id")
        self.rows.pop(record_id, None)


@pytest.fixture()
def memory_repo() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture()
def service(memory_repo: InMemoryRecordRepository) -> RecordService:
    return RecordService(memory_repo)


def test_create_discards_client_supplied_id(service: RecordService) -> None:
    created = service.create(Record(id=42, name="Ann", email="ann@x.com", department="CS"))

    assert created.id == 1
    assert service.get_by_id(42) is None


def test_get_by_id_round_trip(service: RecordService) -> None:
    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))

    assert service.get_by_id(created.id) == created


def test_list_all_returns_every_record(service: RecordService) -> None:
    for name in ("Ann", "Bob"):
        service.create(Record(name=name, email=f"{name}@x.com", department="CS"))

    records = service.list_all()

    assert [r.name for r in records] == ["Ann", "Bob"]
    assert len({r.id for r in records}) == 2


def test_update_overwrites_fields_and_keeps_id(service: RecordService) -> None:
    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))

    updated = service.update(
        created.id, Record(id=99, name="Ann B", email="annb@x.com", department="Math")
    )

    assert updated == Record(id=created.id, name="Ann B", email="annb@x.com", department="Math")
    assert service.get_by_id(created.id) == updated
    assert service.get_by_id(99) is None


def test_update_is_full_replacement(service: RecordService) -> None:
    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))

    updated = service.update(created.id, Record(name="Ann B"))

    assert updated == Record(id=created.id, name="Ann B", email=None, department=None)


def test_update_missing_returns_none_without_creating(
    service: RecordService, memory_repo: InMemoryRecordRepository
) -> None:
    result = service.update(7, Record(name="Ghost"))

    assert result is None
    assert memory_repo.rows == {}
    assert "save" not in memory_repo.calls
    assert "create" not in memory_repo.calls


def test_delete_existing_returns_true(service: RecordService) -> None:
    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))

    assert service.delete(created.id) is True
    assert service.get_by_id(created.id) is None


def test_delete_missing_returns_false_and_skips_removal(
    service: RecordService, memory_repo: InMemoryRecordRepository
) -> None:
    assert service.delete(5) is False
    assert memory_repo.calls == ["exists_by_id"]


def test_delete_twice_reports_not_found(service: RecordService) -> None:
    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))

    assert service.delete(created.id) is True
    assert service.delete(created.id) is False


def test_service_over_sqlite_repository(repository: SQLiteRecordRepository) -> None:
    service = RecordService(repository)

    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))
    updated = service.update(created.id, Record(name="Ann B", email="ann@x.com", department="CS"))

    assert updated.id == created.id
    assert repository.find_by_id(created.id).name == "Ann B"
    assert service.delete(created.id) is True
    assert service.list_all() == []


class VanishingRecordRepository(InMemoryRecordRepository):
    """Deletes the row right after it is looked up, as a concurrent DELETE would."""

    def find_by_id(self, record_id: int) -> Optional[Record]:
        found = super().find_by_id(record_id)
        self.rows.pop(record_id, None)
        return found


def test_update_of_record_deleted_after_lookup_returns_none() -> None:
    repo = VanishingRecordRepository()
    service = RecordService(repo)
    created = service.create(Record(name="Ann", email="ann@x.com", department="CS"))

    assert service.update(created.id, Record(name="Ann B")) is None
    assert "save" in repo.calls
    assert repo.rows == {}
