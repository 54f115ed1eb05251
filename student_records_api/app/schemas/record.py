"""
Pydantic schema for student records.

A single model is used for request and response bodies.  ``id`` is
``None`` for a record that has not been saved yet; the server assigns
it on create and ignores any client-supplied value.  The text fields
carry no format constraints and a missing field deserializes to
``None``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Record(BaseModel):
    """A student record."""

    id: Optional[int] = Field(None, description="Server-generated identifier; null for unsaved records")
    name: Optional[str] = Field(None, description="Student name")
    email: Optional[str] = Field(None, description="Student email address")
    department: Optional[str] = Field(None, description="Department the student belongs to")
