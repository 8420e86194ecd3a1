"""In-memory store of loaded notes and the queries run against it."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterator

from notefinder.note import Note
from notefinder.notebook import Notebook


@dataclass(frozen=True)
class NoteKey:
    """Identifies a note by the notebook holding it and its identifier."""

    notebook: Notebook
    uuid: int


class QueryMethod(IntEnum):
    """How a query is to be evaluated."""

    WITH_INDEX = 0
    DIRECT = 1
    REGEXP = 2
    COMPLEX = 3


@dataclass
class Query:
    """A search: a needle and, optionally, the one notebook to search."""

    needle: str = ""
    haystack: Notebook | None = None
    method: QueryMethod = QueryMethod.WITH_INDEX


def _in_haystack(query: Query, notebook: Notebook) -> bool:
    return query.haystack is None or query.haystack is notebook


class Store:
    """Thread-safe mapping of note keys to notes."""

    def __init__(self, on_loaded: Callable[[Note], None] | None = None) -> None:
        self._data: dict[NoteKey, Note] = {}
        self._lock = threading.Lock()
        self._on_loaded = on_loaded

    def get(self, key: NoteKey) -> Note | None:
        """Return the note stored under ``key``, or None."""
        with self._lock:
            return self._data.get(key)

    def put(self, key: NoteKey, note: Note) -> None:
        """Store ``note`` under ``key``, replacing any earlier one."""
        with self._lock:
            if self._on_loaded is not None:
                self._on_loaded(note)
            self._data[key] = note

    def delete(self, key: NoteKey) -> None:
        """Remove the note under ``key`` if there is one."""
        with self._lock:
            self._data.pop(key, None)

    def query_stream(self, query: Query) -> Iterator[Note]:
        """Yield the notes that match ``query``.

        Each note's ``matching_fields`` is reset and then filled with the
        names of the searchable fields that contain the needle.
        """
        with self._lock:
            items = list(self._data.items())

        needle = query.needle.lower()
        for key, note in items:
            note.matching_fields = []
            if not _in_haystack(query, key.notebook):
                continue
            if not query.needle:
                yield note
                continue
            for name, value in note.searchable_fields().items():
                if needle in value.lower():
                    note.matching_fields.append(name)
            if note.matching_fields:
                yield note

    def query(self, query: Query) -> list[Note]:
        """Return every note in the query's haystack, ignoring the needle."""
        with self._lock:
            return [
                note
                for key, note in self._data.items()
                if _in_haystack(query, key.notebook)
            ]