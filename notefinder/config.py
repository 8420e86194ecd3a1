"""Application context and reading of the notebook configuration."""

from __future__ import annotations

import configparser
import logging
import os
import queue
from enum import Enum, auto
from pathlib import Path

from notefinder.file_backend import FileImplementation
from notefinder.google import GoogleImplementation
from notefinder.mozilla import MozillaImplementation
from notefinder.notebook import Implementation, Notebook, NotebookType
from notefinder.store import Store

log = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = os.path.join(".config", "notefinder.ini")
# Keys before the first section header land in this section; it is skipped.
_DEFAULT_SECTION = "DEFAULT"
_NO_SHARED_SECTION = "\x00shared"


class Request(Enum):
    """Requests that can be sent to the background worker."""

    LOAD_DATA = auto()
    STOP = auto()


class Context:
    """State shared between the worker and the front end."""

    def __init__(
        self,
        notebooks: dict[str, Notebook] | None = None,
        store: Store | None = None,
    ) -> None:
        self.notebooks: dict[str, Notebook] = notebooks if notebooks is not None else {}
        self.store = store if store is not None else Store()
        self.requests: queue.Queue[Request] = queue.Queue(maxsize=1)

    def log(self, *args: object) -> None:
        """Log the arguments separated by spaces."""
        log.info("%s", " ".join(str(arg) for arg in args))


def config_path(home: str | os.PathLike[str] | None = None) -> str:
    """Return the path of the configuration file under ``home``."""
    home_dir = os.fspath(home) if home is not None else str(Path.home())
    return os.path.join(home_dir, CONFIG_RELATIVE_PATH)


def implementation_by_name(name: str, config: dict[str, str]) -> Implementation | None:
    """Create the back end called ``name``, or return None if it is unknown."""
    if name == "file":
        return FileImplementation(config)
    if name == "mozilla":
        return MozillaImplementation(config)
    if name == "google":
        return GoogleImplementation(config)
    return None


def read_config(path: str | os.PathLike[str] | None = None) -> dict[str, Notebook]:
    """Read the notebooks configured in the INI file at ``path``.

    A section without ``impl`` but with ``path`` is a file notebook.
    """
    file_path = os.fspath(path) if path is not None else config_path()
    parser = configparser.ConfigParser(
        default_section=_NO_SHARED_SECTION, interpolation=None, strict=False
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    with open(file_path, encoding="utf-8") as handle:
        parser.read_string(f"[{_DEFAULT_SECTION}]\n" + handle.read(), source=file_path)

    notebooks: dict[str, Notebook] = {}
    for name in parser.sections():
        if name == _DEFAULT_SECTION:
            continue
        config = dict(parser.items(name))
        impl_name = config.get("impl")
        if impl_name is None:
            impl_name = "file" if "path" in config else ""
        notebooks[name] = Notebook(
            name,
            implementation_by_name(impl_name, config),
            config,
            NotebookType.CONFIGURED,
        )
    return notebooks