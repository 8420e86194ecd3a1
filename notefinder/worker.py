"""Background worker that keeps the store in step with the notebooks."""

from __future__ import annotations

import logging
import os
import queue
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from notefinder.config import Context, Request
from notefinder.mozilla import MozillaImplementation, find_mozilla_files
from notefinder.notebook import Notebook, NotebookType
from notefinder.store import NoteKey, Query

log = logging.getLogger(__name__)


class Worker:
    """Loads notebooks into the context's store, on request or periodically."""

    def __init__(
        self, context: Context, on_update: Callable[[], None] | None = None
    ) -> None:
        self.context = context
        self.on_update = on_update

    def discover_bookmarks(
        self, home: str | os.PathLike[str] | None = None
    ) -> list[Notebook]:
        """Add a notebook for every Firefox profile found under ``home``."""
        found = []
        for name, places in find_mozilla_files(home).items():
            config = {"path": places}
            notebook = Notebook(
                name,
                MozillaImplementation(config),
                config,
                NotebookType.AUTO_DISCOVERED,
            )
            self.context.notebooks[name] = notebook
            found.append(notebook)
        return found

    def sync_notebook(self, notebook: Notebook) -> bool:
        """Reload one notebook into the store; return True if anything changed."""
        try:
            data = notebook.load_data()
        except Exception as exc:  # a failing back end must not stop the others
            log.warning("%s: %s", notebook.name, exc)
            return False

        store = self.context.store
        have_updates = False
        for old in store.query(Query(haystack=notebook)):
            if old.uuid not in data:
                have_updates = True
                store.delete(NoteKey(notebook, old.uuid))

        for uuid, item in data.items():
            key = NoteKey(notebook, uuid)
            existing = store.get(key)
            if existing is not None and item.same_as(existing):
                continue
            item.source = notebook
            store.put(key, item)
            have_updates = True

        if have_updates and self.on_update is not None:
            self.on_update()
        return have_updates

    def load_all(self) -> bool:
        """Reload every notebook in parallel; return True if anything changed."""
        notebooks = list(self.context.notebooks.values())
        if not notebooks:
            return False
        with ThreadPoolExecutor(max_workers=len(notebooks)) as pool:
            results = list(pool.map(self.sync_notebook, notebooks))
        return any(results)

    def run(self, interval: float = 10.0) -> None:
        """Serve requests until STOP, reloading every ``interval`` seconds."""
        self.discover_bookmarks()
        deadline = time.monotonic() + interval
        while True:
            timeout = max(0.0, deadline - time.monotonic())
            try:
                request = self.context.requests.get(timeout=timeout)
            except queue.Empty:
                deadline += interval
                now = time.monotonic()
                if deadline <= now:
                    deadline = now + interval
                self.load_all()
                continue
            if request is Request.STOP:
                return
            if request is Request.LOAD_DATA:
                self.load_all()