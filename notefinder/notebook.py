"""Notebooks and the interface their storage back ends implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from notefinder.note import Note


class NotSupportedError(Exception):
    """Raised when a back end does not support an operation."""


class Implementation(ABC):
    """Storage back end of a notebook."""

    @abstractmethod
    def load_data(self) -> dict[int, Note]:
        """Return all notes keyed by their identifier."""

    @abstractmethod
    def put_data(self, note: Note) -> None:
        """Store a new note."""

    @abstractmethod
    def update_data(self, old_note: Note, new_note: Note) -> None:
        """Replace ``old_note`` with ``new_note``."""

    @abstractmethod
    def delete_data(self, note: Note) -> None:
        """Remove a note."""

    @abstractmethod
    def supported_properties(self) -> dict[str, bool]:
        """Map each supported property to whether it is writable."""

    @abstractmethod
    def can_write(self) -> bool:
        """Return True if new items can be written; raise the reason otherwise."""


class NotebookType(IntEnum):
    """How a notebook came to be known."""

    CONFIGURED = 0
    AUTO_DISCOVERED = 1


@dataclass(eq=False)
class Notebook:
    """A named collection of notes backed by an implementation."""

    name: str
    implementation: Implementation | None
    config: dict[str, str] = field(default_factory=dict)
    type: NotebookType = NotebookType.CONFIGURED
    enabled: bool = True
    data: dict[int, Note] = field(default_factory=dict)

    def _backend(self) -> Implementation:
        if self.implementation is None:
            raise NotSupportedError(f"notebook {self.name!r} has no implementation")
        return self.implementation

    def load_data(self) -> dict[int, Note]:
        return self._backend().load_data()

    def can_write(self) -> bool:
        return self._backend().can_write()

    def put_data(self, note: Note) -> None:
        self._backend().put_data(note)

    def update_data(self, old_note: Note, new_note: Note) -> None:
        self._backend().update_data(old_note, new_note)

    def delete_data(self, note: Note) -> None:
        self._backend().delete_data(note)