"""
Record endpoints for API v1.

CRUD routes for student records.  A missing record yields a bare 404
response without a body; a successful delete yields 204.  Request
bodies are only checked for shape by FastAPI, so malformed JSON is
rejected with the framework's 422 response before reaching these
handlers.

Handlers are plain functions because the storage layer blocks on
``sqlite3``; FastAPI runs them in its threadpool so requests are served
concurrently.
"""

from typing import Annotated, List, Union

from fastapi import APIRouter, Depends, Path, Response, status

from student_records_api.app.api.dependencies import get_record_service
from student_records_api.app.schemas.record import Record
from student_records_api.app.services.record_service import RecordService

router = APIRouter()

# SQLite stores INTEGER as a signed 64-bit value; ids outside this range
# cannot be bound to a query.
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1

RecordId = Annotated[int, Path(ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT, description="Record identifier")]


@router.post("", response_model=Record, status_code=status.HTTP_201_CREATED)
def create_record(
    record: Record,
    service: RecordService = Depends(get_record_service),
) -> Record:
    """Create a new record.  Any ``id`` in the body is ignored."""
    return service.create(record)


@router.get("", response_model=List[Record])
def list_records(service: RecordService = Depends(get_record_service)) -> List[Record]:
    """Return all records ordered by ``id``."""
    return service.list_all()


@router.get("/{record_id}", response_model=Record)
def get_record(
    record_id: RecordId,
    service: RecordService = Depends(get_record_service),
) -> Union[Record, Response]:
    record = service.get_by_id(record_id)
    if record is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return record


@router.put("/{record_id}", response_model=Record)
def update_record(
    record_id: RecordId,
    record_in: Record,
    service: RecordService = Depends(get_record_service),
) -> Union[Record, Response]:
    """Replace ``name``, ``email`` and ``department`` of an existing record.

    Returns 404 if the record does not exist; records are never created
    by this endpoint.
    """
    record = service.update(record_id, record_in)
    if record is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(
    record_id: RecordId,
    service: RecordService = Depends(get_record_service),
) -> Response:
    deleted = service.delete(record_id)
    if not deleted:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
