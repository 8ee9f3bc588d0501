"""Length-target filtering for short fortunes.

Each repetition of ``--short`` halves the target length, starting from
``SHORT`` characters and never going below one. The highest level is reserved
and produces a refusal instead of a quote.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from fortune_kind.corpus.selector import pick_uniform
from fortune_kind.models import QuoteOutcome

SHORT = 150
MAX_LEVEL = 255
REFUSAL_LEVEL = MAX_LEVEL


@dataclass(slots=True, frozen=True)
class LengthDecision:
    """What to do with a shortness request before any quote is read.

    ``refuse`` short-circuits the whole pick. Otherwise ``target`` is the
    maximum quote length, or ``None`` for no limit.
    """

    refuse: bool = False
    target: Optional[int] = None


def target_length(level: int, *, short: int = SHORT) -> int:
    """Halve ``short`` once per level above one, clamped to at least 1."""
    if level < 1:
        raise ValueError(f"level must be at least 1, got {level}")
    return max(1, short >> (level - 1))


def decide(level: int, *, max_length: Optional[int] = None, short: int = SHORT) -> LengthDecision:
    """Turn a shortness level and optional explicit length into a decision."""
    if not 0 <= level <= MAX_LEVEL:
        raise ValueError(f"level must be between 0 and {MAX_LEVEL}, got {level}")
    if max_length is not None and max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    if level == REFUSAL_LEVEL:
        return LengthDecision(refuse=True)
    if max_length is not None:
        return LengthDecision(target=max_length)
    if level == 0:
        return LengthDecision()
    return LengthDecision(target=target_length(level, short=short))


def filter_by_length(quotes: Sequence[str], target: Optional[int]) -> List[str]:
    """Return the quotes no longer than ``target`` characters."""
    if target is None:
        return list(quotes)
    return [quote for quote in quotes if len(quote) <= target]


def choose_quote(
    quotes: Sequence[str],
    decision: LengthDecision,
    *,
    rng: Optional[random.Random] = None,
) -> QuoteOutcome:
    """Pick a quote according to ``decision``.

    Falls back to the full set when no quote is short enough and returns an
    empty outcome when there are no quotes at all.
    """
    if decision.refuse:
        return QuoteOutcome.refusal()
    if not quotes:
        return QuoteOutcome.empty()

    pool = filter_by_length(quotes, decision.target) or list(quotes)
    return QuoteOutcome.quote(pick_uniform(pool, rng=rng))
