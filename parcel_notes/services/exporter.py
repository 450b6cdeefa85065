from __future__ import annotations

import html
import logging

import markdown as md

from parcel_notes.core.models import Note, Parcel
from parcel_notes.core.sanitize import sanitize_export_html

log = logging.getLogger(__name__)

UNTITLED = "Untitled"
NO_FOLDER_HEADING = "## Notes (No Folder)"


def export_json(parcel: Parcel) -> str:
    """Exactly what is in memory; no validation, no migration."""
    return parcel.to_json()


def _render_note(note: Note) -> str:
    out = f"### {note.title or UNTITLED}\n\n"
    if note.body:
        out += f"{note.body}\n\n"
    out += f"*Color: {note.color} | Pinned: {'true' if note.pinned else 'false'}*\n\n"
    return out


def export_markdown(parcel: Parcel) -> str:
    """
    Folders in stored order, each followed by its notes in stored order,
    then the unfiled notes. Notes pointing at a folder id that is not in
    `parcel.folders` belong to no section and are left out.
    """
    by_folder: dict[str | None, list[Note]] = {}
    for note in parcel.notes:
        by_folder.setdefault(note.folder_id, []).append(note)

    parts = [
        "# Parcel Notes Export\n\n",
        f"*Total notes: {len(parcel.notes)}*\n",
        f"*Total folders: {len(parcel.folders)}*\n\n",
    ]

    for folder in parcel.folders:
        parts.append(f"## Folder: {folder.name}\n\n")
        for note in by_folder.get(folder.id, []):
            parts.append(_render_note(note))

    unfiled = by_folder.get(None)
    if unfiled:
        parts.append(f"{NO_FOLDER_HEADING}\n\n")
        for note in unfiled:
            parts.append(_render_note(note))

    known = {f.id for f in parcel.folders}
    orphans = sum(len(v) for k, v in by_folder.items() if k is not None and k not in known)
    if orphans:
        log.warning("Markdown export skipped %d note(s) whose folder does not exist", orphans)

    return "".join(parts)


def export_html(parcel: Parcel, *, title: str = "Parcel Notes Export") -> str:
    rendered = md.markdown(export_markdown(parcel), extensions=["fenced_code"])
    rendered = sanitize_export_html(rendered)

    return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <title>{html.escape(title)}</title>
  <style>
    body {{ font-family: sans-serif; padding: 16px; line-height: 1.5; }}
    code, pre {{ background: #f5f5f5; }}
    pre {{ padding: 12px; overflow-x: auto; }}
  </style>
</head>
<body>{rendered}</body>
</html>
"""
