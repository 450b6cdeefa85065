from parcel_notes.core.migrations import migrate, repair_colors
from parcel_notes.core.models import Parcel


def test_repair_colors(make_note):
    p = Parcel(notes=[make_note(id="a", color="neon"), make_note(id="b", color="mint")])
    assert repair_colors(p) == 1
    assert [n.color for n in p.notes] == ["paper", "mint"]


def test_current_version_keeps_version(make_note):
    p = Parcel(version=7, notes=[make_note(color="neon")])
    migrate(p)
    assert p.version == 7
    assert p.notes[0].color == "paper"


def test_migrate_is_idempotent(make_note):
    p = Parcel(notes=[make_note(color="neon")])
    migrate(p)
    once = p.to_dict()
    migrate(p)
    assert p.to_dict() == once


def test_chain_runs_in_order(make_note):
    calls = []

    def v1_to_v2(parcel):
        calls.append(parcel.version)
        for n in parcel.notes:
            n.title = n.title.strip()

    def v2_to_v3(parcel):
        calls.append(parcel.version)

    p = Parcel(version=1, notes=[make_note(title="  padded  ", color="neon")])
    migrate(p, target=3, steps={1: v1_to_v2, 2: v2_to_v3})

    assert calls == [1, 2]
    assert p.version == 3
    assert p.notes[0].title == "padded"
    assert p.notes[0].color == "paper"


def test_chain_starts_from_document_version():
    calls = []
    steps = {1: lambda p: calls.append(1), 2: lambda p: calls.append(2)}
    p = Parcel(version=2)
    migrate(p, target=3, steps=steps)
    assert calls == [2]
    assert p.version == 3
