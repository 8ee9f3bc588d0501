"""Retrieve random quotes (fortunes) or search for them."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

from fortune_kind.corpus.length import SHORT, choose_quote, decide
from fortune_kind.corpus.scanner import scan_all
from fortune_kind.corpus.search import iter_matches
from fortune_kind.corpus.selector import read_weighted
from fortune_kind.models import QuoteOutcome, SearchMatch
from fortune_kind.utils.text import DELIMITER, split_quotes

LOGGER = logging.getLogger(__name__)


def get_quote(
    locations: Sequence[Path],
    level: int = 0,
    *,
    max_length: Optional[int] = None,
    short_length: int = SHORT,
    rng: Optional[random.Random] = None,
) -> QuoteOutcome:
    """Pick a random quote from the corpus at ``locations``.

    The file is chosen with probability proportional to its size, then a quote
    is chosen uniformly from that file. ``level`` counts ``--short`` flags:
    0 means any length, each further level halves the 150 character target,
    and 255 refuses outright once the locations are confirmed to exist.
    """
    decision = decide(level, max_length=max_length, short=short_length)
    candidates = scan_all(locations)
    if decision.refuse:
        LOGGER.debug("Shortness level %d refused", level)
        return QuoteOutcome.refusal()

    contents = read_weighted(candidates, rng=rng, locations=locations)
    quotes = split_quotes(contents)
    LOGGER.debug("Parsed %d quotes, target length %s", len(quotes), decision.target)
    return choose_quote(quotes, decision, rng=rng)


def search_fortunes(pattern: str, locations: Sequence[Path]) -> List[SearchMatch]:
    """Return every quote under ``locations`` that contains ``pattern``."""
    return list(iter_matches(pattern, locations))


def format_match(match: SearchMatch) -> str:
    """Render a match followed by its delimiter line."""
    return match.text + DELIMITER.rstrip("\n")
