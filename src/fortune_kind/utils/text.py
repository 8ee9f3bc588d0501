"""Text helpers for splitting fortune files into quotes."""

from __future__ import annotations

from typing import List

DELIMITER = "\n%\n"


def split_quotes(text: str) -> List[str]:
    """Split raw file contents into trimmed, non-empty quotes in file order.

    A ``%`` line at the very start or end of the file counts as a delimiter
    even without the surrounding newline.
    """
    if text.startswith("%\n"):
        text = "\n" + text
    if text.endswith("\n%"):
        text = text + "\n"

    quotes: List[str] = []
    for part in text.split(DELIMITER):
        stripped = part.strip()
        if stripped:
            quotes.append(stripped)
    return quotes
