from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from parcel_notes.core.errors import ParcelParseError
from parcel_notes.settings import CURRENT_VERSION, JSON_INDENT


U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def _text(value: str, key: str, where: str) -> str:
    # json.loads accepts lone surrogate escapes ("\ud800") that cannot be written back as UTF-8
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ParcelParseError(f"{where}: field `{key}` is not valid UTF-8 text") from None
    return value


def _field(raw: dict, key: str, kind: type, where: str, *, maximum: int = U64_MAX) -> Any:
    if key not in raw:
        raise ParcelParseError(f"{where}: missing field `{key}`")
    value = raw[key]
    # bool is an int subclass
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ParcelParseError(
            f"{where}: field `{key}` expected {kind.__name__}, got {type(value).__name__}"
        )
    if kind is int and not 0 <= value <= maximum:
        raise ParcelParseError(f"{where}: field `{key}` out of range 0..{maximum}")
    if kind is str:
        return _text(value, key, where)
    return value


def _object(raw: Any, where: str) -> dict:
    if not isinstance(raw, dict):
        raise ParcelParseError(f"{where}: expected an object, got {type(raw).__name__}")
    return raw


@dataclass
class Folder:
    id: str
    name: str
    created_at: int
    updated_at: int

    @classmethod
    def from_dict(cls, raw: Any, *, where: str = "folder") -> Folder:
        raw = _object(raw, where)
        return cls(
            id=_field(raw, "id", str, where),
            name=_field(raw, "name", str, where),
            created_at=_field(raw, "createdAt", int, where),
            updated_at=_field(raw, "updatedAt", int, where),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Note:
    id: str
    title: str
    body: str
    folder_id: str | None
    pinned: bool
    color: str
    created_at: int
    updated_at: int

    @classmethod
    def from_dict(cls, raw: Any, *, where: str = "note") -> Note:
        raw = _object(raw, where)
        # absent folderId means unfiled, same as null
        folder_id = raw.get("folderId")
        if folder_id is not None and not isinstance(folder_id, str):
            raise ParcelParseError(
                f"{where}: field `folderId` expected str or null, got {type(folder_id).__name__}"
            )
        if folder_id is not None:
            _text(folder_id, "folderId", where)
        return cls(
            id=_field(raw, "id", str, where),
            title=_field(raw, "title", str, where),
            body=_field(raw, "body", str, where),
            folder_id=folder_id,
            pinned=_field(raw, "pinned", bool, where),
            color=_field(raw, "color", str, where),
            created_at=_field(raw, "createdAt", int, where),
            updated_at=_field(raw, "updatedAt", int, where),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "folderId": self.folder_id,
            "pinned": self.pinned,
            "color": self.color,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Parcel:
    """
    Top-level persisted document: schema version + notes + folders.

    Owned by the caller after load; nothing in this package keeps a reference.
    """

    version: int = CURRENT_VERSION
    notes: list[Note] = field(default_factory=list)
    folders: list[Folder] = field(default_factory=list)

    @classmethod
    def empty(cls) -> Parcel:
        return cls(version=CURRENT_VERSION, notes=[], folders=[])

    @classmethod
    def from_dict(cls, raw: Any) -> Parcel:
        raw = _object(raw, "document")
        notes = _field(raw, "notes", list, "document")
        folders = _field(raw, "folders", list, "document")
        return cls(
            version=_field(raw, "version", int, "document", maximum=U32_MAX),
            notes=[Note.from_dict(n, where=f"note[{i}]") for i, n in enumerate(notes)],
            folders=[Folder.from_dict(f, where=f"folder[{i}]") for i, f in enumerate(folders)],
        )

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "notes": [n.to_dict() for n in self.notes],
            "folders": [f.to_dict() for f in self.folders],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=JSON_INDENT, ensure_ascii=False)
