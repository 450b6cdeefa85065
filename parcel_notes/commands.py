"""
Operations exposed to the application shell.

Every failure leaves this module as a CommandError whose message is a
human-readable string with a category prefix ("load error: ...").
Callers show these messages; they are not meant to be parsed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from parcel_notes.core.errors import DataDirError, ParcelError
from parcel_notes.core.models import Parcel
from parcel_notes.paths import resolve_app_data_dir
from parcel_notes.services.exporter import export_html, export_json, export_markdown
from parcel_notes.storage.repo import ParcelRepository, read_parcel

log = logging.getLogger(__name__)


class CommandError(Exception):
    def __init__(self, category: str, cause: Exception):
        super().__init__(f"{category} error: {cause}")
        self.category = category


def _repo(app_data_root: Path | None) -> ParcelRepository:
    if app_data_root is not None:
        return ParcelRepository(Path(app_data_root))
    try:
        return ParcelRepository(resolve_app_data_dir())
    except DataDirError as e:
        log.error("App data dir resolution failed: %s", e)
        raise CommandError("app_data_dir", e) from e


def _fail(category: str, e: Exception) -> CommandError:
    log.error("%s failed: %s", category, e)
    return CommandError(category, e)


def load_notes(app_data_root: Path | None = None) -> Parcel:
    repo = _repo(app_data_root)
    try:
        return repo.load()
    except ParcelError as e:
        raise _fail("load", e) from e


def save_notes(app_data_root: Path | None, parcel: Parcel) -> None:
    repo = _repo(app_data_root)
    try:
        repo.save(parcel)
    except ParcelError as e:
        raise _fail("save", e) from e


def import_notes_json(app_data_root: Path | None, text: str) -> Parcel:
    """Replace the stored document with `text`, checked by the same rules as load."""
    repo = _repo(app_data_root)
    try:
        parcel = read_parcel(text)
        repo.save(parcel)
    except ParcelError as e:
        raise _fail("import", e) from e
    log.info("Imported %d note(s), %d folder(s)", len(parcel.notes), len(parcel.folders))
    return parcel


def export_notes_json(parcel: Parcel) -> str:
    try:
        return export_json(parcel)
    except (TypeError, ValueError) as e:
        raise _fail("export", e) from e


def export_notes_markdown(parcel: Parcel) -> str:
    try:
        return export_markdown(parcel)
    except (TypeError, ValueError) as e:
        raise _fail("export", e) from e


def export_notes_html(parcel: Parcel) -> str:
    try:
        return export_html(parcel)
    except (TypeError, ValueError) as e:
        raise _fail("export", e) from e


def get_data_dir(app_data_root: Path | None = None) -> str:
    return str(_repo(app_data_root).data_dir)
