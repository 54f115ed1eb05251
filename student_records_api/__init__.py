"""
Top-level package for the Student Records API.

Makes ``student_records_api`` importable so that modules within ``app``
can be referenced by fully qualified names such as
``student_records_api.app.main``.  All functionality lives in
submodules under ``app``.
"""

__all__ = []
