"""Weighted file selection and uniform quote picking."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional, Sequence, TypeVar

from fortune_kind.errors import CorpusReadError, EmptyCorpusError
from fortune_kind.models import Candidate
from fortune_kind.utils.files import read_corpus_file

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def pick_weighted(
    candidates: Sequence[Candidate],
    *,
    rng: Optional[random.Random] = None,
    locations: Sequence[Path] = (),
) -> Candidate:
    """Pick one candidate with probability proportional to its size.

    Candidates are sorted by size first (stable) so a seeded generator always
    yields the same pick regardless of directory listing order.
    """
    rng = rng or random.Random()
    ordered = sorted(candidates, key=lambda candidate: candidate.size)
    total = sum(candidate.size for candidate in ordered)
    if not ordered or total <= 0:
        raise EmptyCorpusError(locations)

    chosen = rng.choices(ordered, weights=[candidate.size for candidate in ordered], k=1)[0]
    LOGGER.debug("Selected %s (%d of %d bytes)", chosen.path, chosen.size, total)
    return chosen


def read_weighted(
    candidates: Sequence[Candidate],
    *,
    rng: Optional[random.Random] = None,
    locations: Sequence[Path] = (),
) -> str:
    """Pick a candidate by size and return its full contents."""
    chosen = pick_weighted(candidates, rng=rng, locations=locations)
    try:
        return read_corpus_file(chosen.path)
    except OSError as exc:
        raise CorpusReadError(chosen.path, exc) from exc


def pick_uniform(items: Sequence[T], *, rng: Optional[random.Random] = None) -> T:
    """Pick one item uniformly at random. ``items`` must not be empty."""
    rng = rng or random.Random()
    return items[rng.randrange(len(items))]
