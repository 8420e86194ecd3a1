"""Notebook back end that keeps one note per file in a directory."""

from __future__ import annotations

import logging
import os
import re
import tempfile

from notefinder.note import Flag, Note, NoteType
from notefinder.notebook import Implementation

log = logging.getLogger(__name__)

_SWAP_FILE_RE = re.compile(r"(^|/)\..*\.sw[pon]$|\.sw[pon]$")
_SNIFF_LIMIT = 16
_SIGNATURES = (
    (b"%PDF-", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
    (b"OggS", "application/ogg"),
    (b"ID3", "audio/mpeg"),
    (b"fLaC", "audio/flac"),
    (b"\x7fELF", "application/x-elf"),
)


def normalize_title(title: str) -> str:
    """Make a title usable as a file name by replacing slashes."""
    return title.replace("/", "∕")


def filename_for(note: Note) -> str:
    """Return the file name of a note; archived notes are hidden files."""
    if not note.flag_is_set(Flag.ARCHIVED):
        return note.title
    return "." + note.title


def detect_mime_type(path: str | os.PathLike[str]) -> str:
    """Guess a file's MIME type from its first bytes."""
    with open(path, "rb") as handle:
        head = handle.read(_SNIFF_LIMIT)
    for magic, mime in _SIGNATURES:
        if head.startswith(magic):
            return mime
    if b"\x00" not in head:
        return "text/plain"
    return "application/octet-stream"


class FileImplementation(Implementation):
    """Notes stored as plain files in one directory."""

    def __init__(self, config: dict[str, str]) -> None:
        self.path = config.get("path", "")
        self.use_extension = False

    def can_write(self) -> bool:
        """Return True if a file can be created in the directory; raise OSError if not."""
        fd, name = tempfile.mkstemp(prefix="tmpfile", dir=self.path)
        os.close(fd)
        os.remove(name)
        return True

    def supported_properties(self) -> dict[str, bool]:
        return {"Title": True, "URI": False, "Body": True}

    def load_data(self) -> dict[int, Note]:
        with os.scandir(self.path) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        data: dict[int, Note] = {}
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                continue
            file_name = entry.name
            if _SWAP_FILE_RE.search(file_name):
                continue
            file_path = os.path.join(self.path, file_name)
            try:
                inode = os.stat(file_path).st_ino
                with open(file_path, "rb") as handle:
                    content = handle.read()
            except OSError as exc:
                log.warning("%s", exc)
                continue

            body = "" if b"\x00" in content else content.decode("utf-8", errors="replace")
            archived = len(file_name) >= 2 and file_name.startswith(".")
            name = file_name[1:] if archived else file_name

            note = Note(uuid=inode, title=name)
            note.set("Body", body, True)
            if archived:
                note.set_flag(Flag.ARCHIVED)

            if body:
                note.type = NoteType.REGULAR
            else:
                note.type = NoteType.FILE
                note.uri = "file://" + file_path
                try:
                    note.mime_type = detect_mime_type(file_path)
                except OSError as exc:
                    log.warning("%s", exc)

            data[inode] = note
        return data

    def put_data(self, note: Note) -> None:
        note.title = normalize_title(note.title)
        path = os.path.join(self.path, note.title)
        if os.path.exists(path):
            raise FileExistsError(
                f'"{note.title}" already exists, cannot create new item'
            )
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "wb") as handle:
            handle.write(note.body.encode("utf-8"))

    def update_data(self, old_note: Note, new_note: Note) -> None:
        """Rewrite the file of ``old_note`` with the title and body of ``new_note``."""
        new_note.title = normalize_title(new_note.title)
        old_path = os.path.join(self.path, filename_for(old_note))
        new_path = os.path.join(self.path, filename_for(new_note))
        os.stat(old_path)
        if new_path != old_path and os.path.exists(new_path):
            raise FileExistsError(
                f'"{new_note.title}" already exists, cannot rename item'
            )
        with open(old_path, "wb") as handle:
            handle.write(new_note.body.encode("utf-8"))
        if new_path != old_path:
            os.replace(old_path, new_path)

    def delete_data(self, note: Note) -> None:
        os.remove(os.path.join(self.path, filename_for(note)))