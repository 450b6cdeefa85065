from __future__ import annotations

from pathlib import Path
from typing import Callable

from PySide6.QtCore import QCoreApplication, QStandardPaths

from parcel_notes.core.errors import DataDirError
from parcel_notes.settings import APP_NAME


def _qt_app_data_location() -> str:
    # Without an application name Qt derives the folder from the executable (python3)
    if QCoreApplication.applicationName() != APP_NAME:
        QCoreApplication.setApplicationName(APP_NAME)
    return QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)


def resolve_app_data_dir(*, locate: Callable[[], str] = _qt_app_data_location) -> Path:
    """Per-user application data root, e.g. ~/.local/share/parcel-notes on Linux."""
    location = locate()
    if not location:
        raise DataDirError("could not determine the per-user application data directory")
    return Path(location)

