"""
Application package initializer.

The application is split into layers: ``api`` (HTTP routes and
dependency wiring), ``services`` (business rules), ``repositories``
(storage) and ``schemas`` (request/response models).  Shared
infrastructure such as settings, logging and database bootstrap lives
in ``core``.
"""

from .main import app  # noqa: F401
