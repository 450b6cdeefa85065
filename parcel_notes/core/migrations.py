from __future__ import annotations

import logging
from typing import Callable

from parcel_notes.core.models import Parcel
from parcel_notes.settings import CURRENT_VERSION, DEFAULT_COLOR, NOTE_COLORS

log = logging.getLogger(__name__)

Migration = Callable[[Parcel], None]

# from_version -> step that rewrites a document of that version into from_version + 1.
# Steps run in order and must only add or reshape data, never drop it.
MIGRATIONS: dict[int, Migration] = {}


def repair_colors(parcel: Parcel) -> int:
    """Reset every note color outside NOTE_COLORS to DEFAULT_COLOR. Returns how many changed."""
    fixed = 0
    for note in parcel.notes:
        if note.color not in NOTE_COLORS:
            log.debug("Note %s: unknown color %r reset to %s", note.id, note.color, DEFAULT_COLOR)
            note.color = DEFAULT_COLOR
            fixed += 1
    return fixed


def migrate(
    parcel: Parcel,
    *,
    target: int = CURRENT_VERSION,
    steps: dict[int, Migration] | None = None,
) -> Parcel:
    """
    Bring `parcel` up to `target` in place and return it.

    Colors are repaired at every version. A document at or above `target`
    keeps its version; older documents run through each step of the chain.
    """
    steps = MIGRATIONS if steps is None else steps

    fixed = repair_colors(parcel)
    if fixed:
        log.info("Repaired %d note color(s)", fixed)

    if parcel.version >= target:
        return parcel

    start = parcel.version
    while parcel.version < target:
        step = steps.get(parcel.version)
        if step is not None:
            step(parcel)
        parcel.version += 1

    log.info("Migrated document from version %d to %d", start, parcel.version)
    return parcel
