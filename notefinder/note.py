"""Notes: the items that notebooks hold and that the store searches."""

from __future__ import annotations

import re
import string
import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum, IntFlag
from itertools import dropwhile
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote_plus

from notefinder.stemming import default_rule_table

if TYPE_CHECKING:
    from notefinder.notebook import Notebook

# Splits on ASCII whitespace, the no-break space and its HTML entity.
_WHITESPACE_RE = re.compile(r"(?:[\t\n\f\r \u00a0]|&nbsp;)+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_EXTRA_PUNCTUATION = frozenset("“”‘’„‚«»…–—‐‑‒−\u00ad")
_ASCII_PUNCTUATION = frozenset(string.punctuation)

# Public field name -> attribute name.
_FIELDS = {
    "UUID": "uuid",
    "Title": "title",
    "Body": "body",
    "URI": "uri",
    "MimeType": "mime_type",
    "Type": "type",
    "flags": "flags",
}
_TEXT_FIELDS = frozenset({"Title", "Body", "URI", "MimeType"})
_SEARCHABLE_FIELDS = ("Title", "Body")


class Flag(IntFlag):
    """Bit flags a note can carry."""

    ARCHIVED = 1 << 0
    READ_ONLY = 1 << 1
    NOTIFY = 1 << 2
    STARRED = 1 << 3
    ENCRYPTED = 1 << 4


class Markup(IntEnum):
    """Markup language of a note body."""

    NONE = 0
    MARKDOWN = 1
    HTML = 2
    TODO_TXT = 3


class NoteType(IntEnum):
    """Kind of item a note stands for."""

    REGULAR = 0
    BOOKMARK = 1
    VOICE = 2
    FILE = 3
    TODO_LIST = 4


def _is_punctuation(ch: str) -> bool:
    return (
        ch in _ASCII_PUNCTUATION
        or ch in _EXTRA_PUNCTUATION
        or unicodedata.category(ch)[0] in "PS"
    )


def _strip_punctuation(word: str) -> str:
    head = "".join(dropwhile(_is_punctuation, word))
    return "".join(dropwhile(_is_punctuation, reversed(head)))[::-1]


def _query_unescape(text: str) -> str:
    """Decode a query-escaped string; raise ValueError on a malformed escape."""
    if _BAD_ESCAPE_RE.search(text):
        raise ValueError(f"invalid escape in {text!r}")
    return unquote_plus(text, errors="replace")


@dataclass(eq=False)
class Note:
    """A single note, bookmark or file held by a notebook."""

    uuid: int = 0
    title: str = ""
    body: str = ""
    uri: str = ""
    mime_type: str = ""
    created_at: datetime | None = None
    modified_at: datetime | None = None
    flags: Flag = Flag(0)
    type: NoteType = NoteType.REGULAR
    markup: Markup = Markup.NONE
    source: Notebook | None = None
    last_matching_query: Any = None
    matching_fields: list[str] = field(default_factory=list)
    additional_properties: dict[str, str] = field(default_factory=dict)

    def same_as(self, other: Note) -> bool:
        """Return True if ``other`` carries the same content as this note."""
        if other.modified_at != self.modified_at:
            return False
        return (
            self.uuid == other.uuid
            and self.title == other.title
            and self.body == other.body
            and self.uri == other.uri
            and int(self.flags) == int(other.flags)
        )

    def set_flag(self, flag: int) -> None:
        self.flags = Flag(int(self.flags) | int(flag))

    def unset_flag(self, flag: int) -> None:
        self.flags = Flag(int(self.flags) & ~int(flag))

    def flag_is_set(self, flag: int) -> bool:
        return int(self.flags) & int(flag) != 0

    def flags_string(self) -> str:
        """Return the 32 flag bits, most significant first, as '+' and '-'."""
        bits = format(int(self.flags) & 0xFFFFFFFF, "032b")
        return bits.replace("1", "+").replace("0", "-")

    def set(self, key: str, value: Any, act: bool) -> None:
        """Set a text field by its public name.

        Non-text fields are left alone. With ``act`` set, changing the body
        also re-detects the markup.
        """
        attribute = _FIELDS[key]
        if key not in _TEXT_FIELDS:
            return
        if not isinstance(value, str):
            raise TypeError(f"{key} takes a string, not {type(value).__name__}")
        setattr(self, attribute, value)
        if act and key == "Body":
            self._detect_markup()

    def _detect_markup(self) -> None:
        self.markup = Markup.NONE

    def searchable_fields(self) -> dict[str, str]:
        """Return the searchable text fields by their public names."""
        return {key: getattr(self, _FIELDS[key]) for key in _SEARCHABLE_FIELDS}

    def words(self) -> dict[str, int]:
        """Count the stems of the words in the searchable fields."""
        table = default_rule_table()
        counts: Counter[str] = Counter()
        for value in self.searchable_fields().values():
            try:
                text = _query_unescape(value)
            except ValueError:
                continue
            for word in _WHITESPACE_RE.split(text):
                clean = _strip_punctuation(word).lower()
                if len(clean) < 3:
                    continue
                counts[table.stem(clean)] += 1
        return dict(counts)