"""Utility helpers for working with corpus files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_corpus_files(location: Path) -> Iterator[Path]:
    """Yield corpus files at a location.

    A file is its own sole corpus file. A directory yields the regular files
    directly inside it, sorted by name; subdirectories are not descended into.
    """
    if location.is_dir():
        for child in sorted(location.iterdir()):
            if child.is_file():
                yield child
    else:
        yield location


def read_corpus_file(path: Path) -> str:
    """Read a whole corpus file as text, replacing undecodable bytes."""
    with path.open("rb") as handle:
        data = handle.read()
    return data.decode("utf-8", errors="replace")
