from .errors import (
    DataDirError,
    ParcelError,
    ParcelMigrationError,
    ParcelParseError,
    ParcelValidationError,
    StorageError,
)
from .migrations import migrate
from .models import Folder, Note, Parcel
from .validation import validate

__all__ = ["Folder",
           "Note",
           "Parcel",
           "validate",
           "migrate",
           "ParcelError",
           "ParcelParseError",
           "ParcelValidationError",
           "ParcelMigrationError",
           "StorageError",
           "DataDirError"
           ]
