import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from parcel_notes.core.models import Folder, Note, Parcel


def note_dict(**overrides):
    d = {
        "id": "n1",
        "title": "Title",
        "body": "",
        "folderId": None,
        "pinned": False,
        "color": "paper",
        "createdAt": 1700000000000,
        "updatedAt": 1700000000000,
    }
    d.update(overrides)
    return d


def folder_dict(**overrides):
    d = {"id": "f1", "name": "Work", "createdAt": 1700000000000, "updatedAt": 1700000000000}
    d.update(overrides)
    return d


@pytest.fixture
def make_note():
    def _make(**overrides):
        return Note.from_dict(note_dict(**overrides))
    return _make


@pytest.fixture
def make_folder():
    def _make(**overrides):
        return Folder.from_dict(folder_dict(**overrides))
    return _make


@pytest.fixture
def sample_parcel(make_note, make_folder):
    return Parcel(
        version=1,
        notes=[
            make_note(id="n1", folderId="f1", title="A", body="", color="paper", pinned=False),
            make_note(id="n2", folderId=None, title="B", body="x", color="sky", pinned=True),
        ],
        folders=[make_folder(id="f1", name="Work")],
    )
