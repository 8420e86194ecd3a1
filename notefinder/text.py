"""Helpers for shortening text for display."""

from __future__ import annotations


def short_text(text: str, limit: int) -> str:
    """Return the first line of ``text``, shortened if longer than ``limit``.

    Whole words are kept while the collected text stays within twice the
    limit; if not even one word fits, the line is cut at ``limit``.
    """
    line = text.split("\n")[0]
    if len(line) <= limit:
        return line

    kept: list[str] = []
    for word in line.split(" "):
        if len(" ".join(kept) + word) <= limit * 2:
            kept.append(word)

    if not kept:
        return line[:limit] + "..."
    return " ".join(kept) + "..."