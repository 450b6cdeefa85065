import pytest

from parcel_notes.core.errors import ParcelValidationError
from parcel_notes.core.models import Parcel
from parcel_notes.core.validation import validate


@pytest.mark.parametrize("version", [0, 11])
def test_version_out_of_range(version):
    with pytest.raises(ParcelValidationError, match="Invalid data version"):
        validate(Parcel(version=version))


@pytest.mark.parametrize("version", [1, 10])
def test_version_bounds_accepted(version):
    validate(Parcel(version=version))


def test_empty_note_id(make_note):
    p = Parcel(notes=[make_note(id="a"), make_note(id="")])
    with pytest.raises(ParcelValidationError, match="Note at index 1 has empty ID") as exc:
        validate(p)
    assert exc.value.index == 1
    assert exc.value.field == "id"


def test_empty_folder_id(make_folder):
    with pytest.raises(ParcelValidationError, match="Folder at index 0 has empty ID"):
        validate(Parcel(folders=[make_folder(id="")]))


def test_blank_folder_name(make_folder):
    p = Parcel(folders=[make_folder(id="a"), make_folder(id="b", name="   ")])
    with pytest.raises(ParcelValidationError, match="Folder at index 1 has empty name"):
        validate(p)


def test_unknown_color_tolerated(make_note):
    validate(Parcel(notes=[make_note(color="neon")]))
