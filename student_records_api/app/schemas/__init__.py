"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer so that the API
representation does not depend on how records are persisted.
"""

from .record import Record  # noqa: F401
