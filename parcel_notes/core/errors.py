from __future__ import annotations


class ParcelError(Exception):
    """Base class for everything the persistence layer raises."""


class ParcelParseError(ParcelError):
    """The stored document is not JSON, or not shaped like a Parcel."""


class ParcelValidationError(ParcelError):
    def __init__(self, message: str, *, index: int | None = None, field: str | None = None):
        super().__init__(message)
        self.index = index
        self.field = field


class ParcelMigrationError(ParcelValidationError):
    """A migrated document no longer passes validation (a bug in a migration step)."""


class StorageError(ParcelError):
    """Directory creation, read or write failed."""


class DataDirError(ParcelError):
    """The per-user application data directory could not be determined."""
