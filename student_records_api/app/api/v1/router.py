"""
Top-level router for version 1 of the API.

The record routes are exposed under ``/records``.  Older clients of the
service address the same resource as ``/students``, so the router is
included a second time under that prefix and hidden from the OpenAPI
schema to avoid duplicate operation IDs.
"""

from fastapi import APIRouter

from .endpoints import records

router = APIRouter()

router.include_router(records.router, prefix="/records", tags=["records"])
router.include_router(records.router, prefix="/students", tags=["records"], include_in_schema=False)
