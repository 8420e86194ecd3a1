import sqlite3
from contextlib import closing

import pytest

from notefinder.mozilla import MozillaImplementation, find_mozilla_files
from notefinder.note import Flag, Note, NoteType
from notefinder.notebook import NotSupportedError


@pytest.fixture
def places(tmp_path):
    path = tmp_path / "places.sqlite"
    with closing(sqlite3.connect(path)) as db:
        db.execute("create table moz_places (id integer primary key, url text, description text)")
        db.execute("create table moz_bookmarks (id integer primary key, title text, fk integer)")
        db.execute("insert into moz_places values (1, 'https://example.com/', 'An example')")
        db.execute("insert into moz_places values (2, 'https://example.com/b', null)")
        db.execute("insert into moz_bookmarks values (10, 'Example', 1)")
        db.execute("insert into moz_bookmarks values (11, 'Second', 2)")
        db.execute("insert into moz_bookmarks values (12, 'Folder', null)")
        db.commit()
    return path


def test_load_bookmarks(places):
    data = MozillaImplementation({"path": str(places)}).load_data()
    assert sorted(data) == [10, 11]
    first = data[10]
    assert first.title == "Example"
    assert first.body == "An example"
    assert first.uri == "https://example.com/"
    assert first.type == NoteType.BOOKMARK
    assert first.flag_is_set(Flag.READ_ONLY)
    assert data[11].body == ""


def test_load_missing_database(tmp_path):
    backend = MozillaImplementation({"path": str(tmp_path / "none.sqlite")})
    with pytest.raises(sqlite3.Error):
        backend.load_data()


def test_read_only_operations():
    backend = MozillaImplementation({"path": "x"})
    note = Note(uuid=1)
    assert backend.supported_properties() == {"Title": False, "URI": False, "Body": False}
    with pytest.raises(NotSupportedError):
        backend.can_write()
    with pytest.raises(NotSupportedError, match="Creating bookmarks"):
        backend.put_data(note)
    with pytest.raises(NotSupportedError, match="Editing bookmarks"):
        backend.update_data(note, note)
    with pytest.raises(NotSupportedError, match="Deleting bookmarks"):
        backend.delete_data(note)


def test_find_mozilla_files(tmp_path):
    base = tmp_path / ".mozilla" / "firefox"
    release = base / "abc.default-release"
    plain = base / "xyz.default"
    for directory in (release, plain):
        directory.mkdir(parents=True)
        (directory / "places.sqlite").write_bytes(b"")
    (base / "empty.default").mkdir()
    (base / "other").mkdir()
    (base / "other" / "places.sqlite").write_bytes(b"")
    assert find_mozilla_files(tmp_path) == {
        "abc": str(release / "places.sqlite"),
        "xyz": str(plain / "places.sqlite"),
    }


def test_find_mozilla_files_without_firefox(tmp_path):
    assert find_mozilla_files(tmp_path) == {}