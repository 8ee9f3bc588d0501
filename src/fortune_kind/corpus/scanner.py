"""Enumerate corpus files and their byte sizes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from fortune_kind.errors import CorpusNotFoundError, CorpusReadError
from fortune_kind.models import Candidate
from fortune_kind.utils.files import iter_corpus_files

LOGGER = logging.getLogger(__name__)


def scan(location: Path) -> List[Candidate]:
    """Return one candidate per corpus file at ``location``.

    Raises ``CorpusNotFoundError`` when the location is missing and
    ``CorpusReadError`` for any other filesystem failure.
    """
    candidates: List[Candidate] = []
    try:
        location.stat()
        for path in iter_corpus_files(location):
            candidates.append(Candidate(path=path, size=path.stat().st_size))
    except FileNotFoundError as exc:
        raise CorpusNotFoundError(Path(exc.filename or location)) from exc
    except OSError as exc:
        raise CorpusReadError(location, exc) from exc

    LOGGER.debug("Found %d corpus files in %s", len(candidates), location)
    return candidates


def scan_all(locations: Sequence[Path]) -> List[Candidate]:
    """Scan several locations into a single candidate list, in order."""
    candidates: List[Candidate] = []
    for location in locations:
        candidates.extend(scan(location))
    return candidates
