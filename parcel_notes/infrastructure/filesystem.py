# parcel_notes/infrastructure/filesystem.py

from __future__ import annotations

import os
import uuid
from contextlib import suppress
from pathlib import Path


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Atomic-ish file write:
    - create missing parent directories
    - write to temp file in same directory
    - fsync
    - replace()

    Readers see either the previous content or the new one, never half a file.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())

        tmp_path.replace(path)

    finally:
        with suppress(OSError):
            if tmp_path.exists():
                tmp_path.unlink()
