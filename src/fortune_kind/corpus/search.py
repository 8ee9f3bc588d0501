"""Substring search across every quote in a corpus."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Sequence

from fortune_kind.corpus.scanner import scan_all
from fortune_kind.errors import CorpusReadError
from fortune_kind.models import SearchMatch
from fortune_kind.utils.files import read_corpus_file
from fortune_kind.utils.text import split_quotes

LOGGER = logging.getLogger(__name__)


def iter_matches(pattern: str, locations: Sequence[Path]) -> Iterator[SearchMatch]:
    """Yield every quote containing ``pattern``.

    Files come in scan order and quotes in file order. The pattern is a plain
    substring, case sensitive.
    """
    for candidate in scan_all(locations):
        LOGGER.debug("Searching %s", candidate.path)
        try:
            contents = read_corpus_file(candidate.path)
        except OSError as exc:
            raise CorpusReadError(candidate.path, exc) from exc

        for quote in split_quotes(contents):
            if pattern in quote:
                yield SearchMatch(path=candidate.path, text=quote)
