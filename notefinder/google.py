"""Placeholder back end for Google notes; nothing can be read or written yet."""

from __future__ import annotations

from notefinder.note import Note
from notefinder.notebook import Implementation, NotSupportedError


class GoogleImplementation(Implementation):
    """Back end that holds no notes and refuses every change."""

    def __init__(self, config: dict[str, str]) -> None:
        self.config = dict(config)

    def can_write(self) -> bool:
        raise NotSupportedError("creating new items is not currently supported")

    def supported_properties(self) -> dict[str, bool]:
        return {"Title": False, "URI": False, "Body": False}

    def load_data(self) -> dict[int, Note]:
        return {}

    def put_data(self, note: Note) -> None:
        raise NotSupportedError("creating items is not currently supported")

    def update_data(self, old_note: Note, new_note: Note) -> None:
        """Refuse the edit; a mismatched pair of notes is rejected first."""
        if old_note.uuid != new_note.uuid:
            raise ValueError(
                f"cannot update item {old_note.uuid} with item {new_note.uuid}"
            )
        raise NotSupportedError("editing items is not currently supported")

    def delete_data(self, note: Note) -> None:
        raise NotSupportedError("deleting items is not currently supported")