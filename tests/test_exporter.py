import json

from parcel_notes.core.models import Parcel
from parcel_notes.services.exporter import export_html, export_json, export_markdown


def test_markdown_grouping(sample_parcel):
    assert export_markdown(sample_parcel) == (
        "# Parcel Notes Export\n\n"
        "*Total notes: 2*\n"
        "*Total folders: 1*\n\n"
        "## Folder: Work\n\n"
        "### A\n\n"
        "*Color: paper | Pinned: false*\n\n"
        "## Notes (No Folder)\n\n"
        "### B\n\n"
        "x\n\n"
        "*Color: sky | Pinned: true*\n\n"
    )


def test_orphan_notes_dropped(make_note, make_folder):
    p = Parcel(
        notes=[make_note(id="n1", title="Orphan", folderId="gone")],
        folders=[make_folder(id="f1", name="Work")],
    )
    out = export_markdown(p)
    assert "Orphan" not in out
    assert "## Notes (No Folder)" not in out
    assert "*Total notes: 1*" in out


def test_empty_folder_still_listed(make_folder):
    out = export_markdown(Parcel(folders=[make_folder(name="Empty")]))
    assert out.endswith("## Folder: Empty\n\n")


def test_untitled_and_order(make_note, make_folder):
    p = Parcel(
        notes=[
            make_note(id="1", title="", folderId="f2"),
            make_note(id="2", title="second", folderId="f1"),
            make_note(id="3", title="third", folderId="f2"),
        ],
        folders=[make_folder(id="f2", name="Later"), make_folder(id="f1", name="Earlier")],
    )
    out = export_markdown(p)
    headings = [line for line in out.splitlines() if line.startswith("#")]
    assert headings == [
        "# Parcel Notes Export",
        "## Folder: Later",
        "### Untitled",
        "### third",
        "## Folder: Earlier",
        "### second",
    ]


def test_json_export_is_in_memory_state(make_note):
    p = Parcel(version=42, notes=[make_note(color="neon", title="é")])
    out = export_json(p)
    assert json.loads(out) == p.to_dict()
    assert "é" in out
    assert out.startswith('{\n  "version": 42,')


def test_html_export_sanitizes_bodies(make_note):
    p = Parcel(notes=[make_note(title="Hi", body="<script>alert(1)</script>\n\n**bold**")])
    out = export_html(p)
    assert "<h1>Parcel Notes Export</h1>" in out
    assert "<strong>bold</strong>" in out
    assert "<script" not in out


def test_html_export_strips_markup_the_export_never_emits(make_note):
    body = '<table><tr><td>cell</td></tr></table>\n\n<iframe src="x"></iframe>\n\n[site](javascript:alert(1))'
    out = export_html(Parcel(notes=[make_note(title="T", body=body)]))
    assert "<table" not in out
    assert "<td" not in out
    assert "<iframe" not in out
    assert "javascript:" not in out
    assert "cell" in out
