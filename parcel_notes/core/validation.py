from __future__ import annotations

from parcel_notes.core.errors import ParcelValidationError
from parcel_notes.core.models import Parcel
from parcel_notes.settings import MAX_VERSION, MIN_VERSION


def validate(parcel: Parcel) -> None:
    """
    Structural checks run before and after migration.

    Unknown note colors are NOT an error here; migrate() repairs them.
    Raises ParcelValidationError on the first violation found.
    """
    if not MIN_VERSION <= parcel.version <= MAX_VERSION:
        raise ParcelValidationError(
            f"Invalid data version: {parcel.version}. Expected {MIN_VERSION}-{MAX_VERSION}.",
            field="version",
        )

    for idx, note in enumerate(parcel.notes):
        if not note.id:
            raise ParcelValidationError(f"Note at index {idx} has empty ID", index=idx, field="id")

    for idx, folder in enumerate(parcel.folders):
        if not folder.id:
            raise ParcelValidationError(f"Folder at index {idx} has empty ID", index=idx, field="id")
        if not folder.name.strip():
            raise ParcelValidationError(f"Folder at index {idx} has empty name", index=idx, field="name")
