"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """User-supplied input was rejected before reaching the store."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class RecordOutOfRangeError(DomainException):
    """A record index lies outside the records currently in the store."""


class StorageError(DomainException):
    """The underlying file could not be opened, read or written."""


class MalformedRecordError(StorageError):
    """Fewer bytes than a full record were available."""


class StoreNotFoundError(StorageError):
    """The product data file does not exist."""
