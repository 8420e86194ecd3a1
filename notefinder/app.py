"""Command-line front end: load the notebooks and search them."""

from __future__ import annotations

import argparse
import configparser
import logging
import sys

from notefinder.config import Context, read_config
from notefinder.note import Note, NoteType
from notefinder.store import Query
from notefinder.text import short_text
from notefinder.worker import Worker

log = logging.getLogger(__name__)

APP_NAME = "Notefinder"
APP_VERSION = 0.1


def _describe(note: Note, needle: str) -> str:
    if note.body:
        detail = short_text(note.body, 48)
    elif note.type is NoteType.BOOKMARK:
        detail = note.uri
    elif note.type is NoteType.FILE:
        detail = note.mime_type
    else:
        detail = ""
    if needle:
        detail += f" (matches:  {', '.join(note.matching_fields)})"
    return f"{note.title}\t{detail}"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notefinder", description="Search notes, files and bookmarks."
    )
    parser.add_argument("query", nargs="?", default="", help="text to search for")
    parser.add_argument("-c", "--config", help="configuration file to read")
    parser.add_argument("-n", "--notebook", help="search only this notebook")
    parser.add_argument(
        "--no-discover",
        action="store_true",
        help="do not add Firefox bookmark notebooks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load every notebook, run the query and print the matching notes."""
    args = _parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    log.info("%s %s started", APP_NAME, APP_VERSION)
    log.info("%s", "-" * (len(APP_NAME) + 12))

    try:
        notebooks = read_config(args.config)
    except (OSError, configparser.Error) as exc:
        print(f"notefinder: cannot read configuration: {exc}", file=sys.stderr)
        return 1

    context = Context(notebooks)
    worker = Worker(context)
    if not args.no_discover:
        worker.discover_bookmarks()

    haystack = None
    if args.notebook is not None:
        haystack = context.notebooks.get(args.notebook)
        if haystack is None:
            print(f"notefinder: no notebook named {args.notebook!r}", file=sys.stderr)
            return 1

    worker.load_all()
    query = Query(needle=args.query, haystack=haystack)
    notes = sorted(context.store.query_stream(query), key=lambda note: note.uuid)
    for note in notes:
        print(_describe(note, args.query))
    print(f"{len(notes)} results")
    return 0


if __name__ == "__main__":
    sys.exit(main())