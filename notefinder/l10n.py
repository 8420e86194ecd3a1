"""Localisation of user-facing strings, with optional recording of new ones."""

from __future__ import annotations

import json
import logging
import os
import threading
from functools import lru_cache

log = logging.getLogger(__name__)

TRANSLATION_FILE = "translation.json"
RECORD_ENV = "NF_MAKE_L10N"


class Localizer:
    """Translates strings and, if asked, records unknown ones in a JSON file."""

    def __init__(
        self,
        translation_file: str | os.PathLike[str] = TRANSLATION_FILE,
        record: bool = False,
    ) -> None:
        self.translation_file = translation_file
        self.record = record
        self.translations: dict[str, str] = {}
        self._lock = threading.Lock()

    def localize(self, text: str) -> str:
        """Return the translation of ``text``, or ``text`` itself."""
        localized = self.translations.get(text) or text
        if self.record:
            self._record(text)
        return localized

    def _record(self, text: str) -> None:
        with self._lock:
            try:
                with open(self.translation_file, encoding="utf-8") as handle:
                    known = json.load(handle)
            except (OSError, ValueError):
                known = {}
            if not isinstance(known, dict):
                known = {}
            if text in known:
                return
            known[text] = ""
            payload = json.dumps(known, indent=2, sort_keys=True, ensure_ascii=False)
            try:
                with open(self.translation_file, "w", encoding="utf-8") as handle:
                    handle.write(payload)
            except OSError as exc:
                log.warning("cannot write translations: %s", exc)


@lru_cache(maxsize=None)
def _default_localizer() -> Localizer:
    return Localizer(TRANSLATION_FILE, os.environ.get(RECORD_ENV, "") != "")


def l10n(text: str) -> str:
    """Localise ``text`` with the application's default localizer."""
    return _default_localizer().localize(text)