"""
API dependencies.

Builds the storage and service objects for each request from the
settings attached to the running application, which makes
``create_app`` the single place where the layers are wired together.
"""

from fastapi import Depends, Request

from student_records_api.app.core.db import get_database_path
from student_records_api.app.repositories import RecordRepository, SQLiteRecordRepository
from student_records_api.app.services.record_service import RecordService


def get_record_repository(request: Request) -> RecordRepository:
    """Return a repository bound to the application's database."""
    db_path = get_database_path(request.app.state.settings.database_url)
    return SQLiteRecordRepository(db_path)


def get_record_service(
    repository: RecordRepository = Depends(get_record_repository),
) -> RecordService:
    return RecordService(repository)
