import os

import pytest

from notefinder.file_backend import (
    FileImplementation,
    detect_mime_type,
    filename_for,
    normalize_title,
)
from notefinder.note import Flag, Note, NoteType


@pytest.fixture
def backend(tmp_path):
    return FileImplementation({"path": str(tmp_path)})


def test_normalize_title():
    assert normalize_title("a/b/c") == "a∕b∕c"
    assert normalize_title("plain") == "plain"


def test_filename_for():
    note = Note(title="todo")
    assert filename_for(note) == "todo"
    note.set_flag(Flag.ARCHIVED)
    assert filename_for(note) == ".todo"


def test_supported_properties(backend):
    assert backend.supported_properties() == {"Title": True, "URI": False, "Body": True}


def test_can_write_leaves_no_files(backend, tmp_path):
    assert backend.can_write() is True
    assert list(tmp_path.iterdir()) == []


def test_can_write_missing_directory(tmp_path):
    backend = FileImplementation({"path": str(tmp_path / "missing")})
    with pytest.raises(OSError):
        backend.can_write()


def test_put_and_load_round_trip(backend, tmp_path):
    backend.put_data(Note(title="shopping", body="milk\neggs\n"))
    data = backend.load_data()
    inode = os.stat(tmp_path / "shopping").st_ino
    assert list(data) == [inode]
    note = data[inode]
    assert note.uuid == inode
    assert note.title == "shopping"
    assert note.body == "milk\neggs\n"
    assert note.type == NoteType.REGULAR
    assert not note.flag_is_set(Flag.ARCHIVED)


def test_put_normalizes_title(backend, tmp_path):
    note = Note(title="a/b", body="x")
    backend.put_data(note)
    assert note.title == "a∕b"
    assert (tmp_path / "a∕b").read_text(encoding="utf-8") == "x"


def test_put_existing_raises(backend, tmp_path):
    (tmp_path / "dup").write_text("old")
    with pytest.raises(FileExistsError):
        backend.put_data(Note(title="dup", body="new"))
    assert (tmp_path / "dup").read_text() == "old"


def test_hidden_file_is_archived(backend, tmp_path):
    (tmp_path / ".old").write_text("gone")
    notes = list(backend.load_data().values())
    assert len(notes) == 1
    assert notes[0].title == "old"
    assert notes[0].flag_is_set(Flag.ARCHIVED)


def test_skips_swap_files_and_directories(backend, tmp_path):
    (tmp_path / ".note.swp").write_text("swap")
    (tmp_path / "note.swo").write_text("swap")
    (tmp_path / "sub").mkdir()
    (tmp_path / "keep").write_text("kept")
    titles = [note.title for note in backend.load_data().values()]
    assert titles == ["keep"]


def test_binary_file_becomes_file_note(backend, tmp_path):
    path = tmp_path / "paper.pdf"
    path.write_bytes(b"%PDF-1.4\x00\x01\x02")
    note = next(iter(backend.load_data().values()))
    assert note.type == NoteType.FILE
    assert note.body == ""
    assert note.uri == "file://" + str(path)
    assert note.mime_type == "application/pdf"


def test_detect_mime_type(tmp_path):
    png = tmp_path / "img"
    png.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    blob = tmp_path / "blob"
    blob.write_bytes(b"\x00\x01\x02\x03")
    assert detect_mime_type(png) == "image/png"
    assert detect_mime_type(blob) == "application/octet-stream"


def test_load_missing_directory(tmp_path):
    backend = FileImplementation({"path": str(tmp_path / "missing")})
    with pytest.raises(OSError):
        backend.load_data()


def test_delete_archived_note(backend, tmp_path):
    (tmp_path / ".gone").write_text("x")
    (tmp_path / "stay").write_text("y")
    notes = backend.load_data().values()
    archived = next(note for note in notes if note.flag_is_set(Flag.ARCHIVED))
    backend.delete_data(archived)
    remaining = [note.title for note in backend.load_data().values()]
    assert remaining == ["stay"]