"""
Pytest configuration for the Student Records API.

Provides fixtures for:
- A migrated SQLite database in a temporary directory
- A repository bound to that database
- Settings and a TestClient for HTTP-level tests
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from student_records_api.app.core.config import Settings
from student_records_api.app.core.db import init_db
from student_records_api.app.main import create_app
from student_records_api.app.repositories import SQLiteRecordRepository


@pytest.fixture()
def db_path(tmp_path) -> str:
    """Path to a freshly migrated database file."""
    path = str(tmp_path / "records_test.db")
    init_db(path)
    return path


@pytest.fixture()
def repository(db_path: str) -> SQLiteRecordRepository:
    return SQLiteRecordRepository(db_path)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a database file that the app creates on startup."""
    return Settings(
        database_url=str(tmp_path / "api_test.db"),
        log_level="DEBUG",
        api_prefix="",
        cors_origins="*",
    )


@pytest.fixture()
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient with the lifespan (database migration) already run."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
