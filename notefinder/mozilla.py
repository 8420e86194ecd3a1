"""Read-only back end for Firefox bookmarks."""

from __future__ import annotations

import logging
import os
import re
import sqlite3
from contextlib import closing
from pathlib import Path
from urllib.request import pathname2url

from notefinder.note import Flag, Note, NoteType
from notefinder.notebook import Implementation, NotSupportedError

log = logging.getLogger(__name__)

_QUERY = """
    select b.id, b.title, p.url, ifnull(p.description, '')
    from moz_bookmarks b, moz_places p where b.fk = p.id
"""
_PROFILE_RE = re.compile(r"/firefox/([^/]+)\.default(?:-release)?/")


class MozillaImplementation(Implementation):
    """Bookmarks read from a Firefox ``places.sqlite`` database."""

    def __init__(self, config: dict[str, str]) -> None:
        self.path = config.get("path", "")

    def can_write(self) -> bool:
        raise NotSupportedError("Creating new bookmarks is not supported yet")

    def supported_properties(self) -> dict[str, bool]:
        return {"Title": False, "URI": False, "Body": False}

    def load_data(self) -> dict[int, Note]:
        # Opened as immutable so a running browser's exclusive lock is bypassed.
        uri = f"file:{pathname2url(self.path)}?mode=ro&immutable=1"
        data: dict[int, Note] = {}
        with closing(sqlite3.connect(uri, uri=True)) as db:
            for bookmark_id, title, url, description in db.execute(_QUERY):
                note = Note(uuid=int(bookmark_id), title=title or "")
                note.set("Body", description or "", True)
                note.set_flag(Flag.READ_ONLY)
                note.uri = url or ""
                note.type = NoteType.BOOKMARK
                data[note.uuid] = note
        return data

    def put_data(self, note: Note) -> None:
        raise NotSupportedError("Creating bookmarks is not currently supported")

    def update_data(self, old_note: Note, new_note: Note) -> None:
        """Refuse the edit; a mismatched pair of bookmarks is rejected first."""
        if old_note.uuid != new_note.uuid:
            raise ValueError(
                f"cannot update bookmark {old_note.uuid} with bookmark {new_note.uuid}"
            )
        raise NotSupportedError("Editing bookmarks is not currently supported")

    def delete_data(self, note: Note) -> None:
        raise NotSupportedError("Deleting bookmarks is not currently supported")


def find_mozilla_files(home: str | os.PathLike[str] | None = None) -> dict[str, str]:
    """Map Firefox profile names to their ``places.sqlite`` paths."""
    home_dir = os.fspath(home) if home is not None else str(Path.home())
    base_dir = os.path.join(home_dir, ".mozilla", "firefox")

    files: dict[str, str] = {}
    try:
        with os.scandir(base_dir) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        log.warning("%s", exc)
        return files

    for entry in entries:
        if not entry.is_dir() or "default" not in entry.name:
            continue
        places = os.path.join(base_dir, entry.name, "places.sqlite")
        try:
            os.stat(places)
        except OSError as exc:
            log.warning("%s", exc)
            continue
        match = _PROFILE_RE.search(places.replace(os.sep, "/"))
        if match:
            files[match.group(1)] = places
    return files