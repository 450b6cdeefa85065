from __future__ import annotations
from pathlib import Path

APP_NAME = "parcel-notes"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

# <app-data-root>/parcel/notes.json
DATA_SUBDIR = "parcel"
DATA_FILENAME = "notes.json"

NOTE_COLORS = ("paper", "yellow", "mint", "lavender", "salmon", "sky")
DEFAULT_COLOR = "paper"

CURRENT_VERSION = 1
MIN_VERSION = 1
MAX_VERSION = 10

JSON_INDENT = 2
