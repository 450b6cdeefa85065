from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from parcel_notes.core.errors import (
    ParcelMigrationError,
    ParcelParseError,
    ParcelValidationError,
    StorageError,
)
from parcel_notes.core.migrations import migrate
from parcel_notes.core.models import Parcel
from parcel_notes.core.validation import validate
from parcel_notes.infrastructure.filesystem import atomic_write_text
from parcel_notes.settings import DATA_FILENAME, DATA_SUBDIR

log = logging.getLogger(__name__)


def parse_parcel(text: str) -> Parcel:
    try:
        raw = json.loads(text)
        return Parcel.from_dict(raw)
    except (json.JSONDecodeError, ParcelParseError) as e:
        raise ParcelParseError(f"Failed to parse JSON: {e}. File may be corrupt.") from e


def read_parcel(text: str) -> Parcel:
    """
    parse -> validate -> migrate -> validate again.

    Shared by load and import so both accept exactly the same documents.
    """
    parcel = parse_parcel(text)
    validate(parcel)
    migrate(parcel)
    try:
        validate(parcel)
    except ParcelValidationError as e:
        raise ParcelMigrationError(
            f"Migrated document failed validation: {e}", index=e.index, field=e.field
        ) from e
    return parcel


@dataclass(frozen=True)
class ParcelRepository:
    app_data_dir: Path

    @property
    def data_dir(self) -> Path:
        return Path(self.app_data_dir) / DATA_SUBDIR

    @property
    def data_file(self) -> Path:
        return self.data_dir / DATA_FILENAME

    def load(self) -> Parcel:
        path = self.data_file
        if not path.exists():
            log.info("No data file at %s; starting with an empty document", path)
            return Parcel.empty()

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

        parcel = read_parcel(text)
        log.info(
            "Loaded %d note(s), %d folder(s) from %s",
            len(parcel.notes), len(parcel.folders), path,
        )
        return parcel

    def save(self, parcel: Parcel) -> None:
        path = self.data_file
        try:
            text = parcel.to_json()
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to serialize document: {e}") from e
        try:
            # UnicodeEncodeError is a ValueError
            atomic_write_text(path, text, encoding="utf-8")
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        log.info(
            "Saved %d note(s), %d folder(s) to %s",
            len(parcel.notes), len(parcel.folders), path,
        )
