"""
Application exceptions.

Not-found outcomes are expressed as ``None``/``False`` return values,
not exceptions.  The classes below cover failures that abort the
current request.
"""


class RecordsAPIError(Exception):
    """Base class for errors raised by the records service."""
    pass


class StorageError(RecordsAPIError):
    """Raised when the underlying database fails (connection loss,
    constraint violation, locked database and so on)."""
    pass
