"""Load notes, files and Firefox bookmarks into one in-memory store and search them."""

__version__ = "0.1.0"