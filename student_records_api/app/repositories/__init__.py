"""
Storage layer for student records.

``RecordRepository`` defines the contract; ``SQLiteRecordRepository``
is the implementation used by the application.
"""

from .base import RecordRepository  # noqa: F401
from .sqlite_repository import SQLiteRecordRepository  # noqa: F401
