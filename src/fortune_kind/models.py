"""Core fortune-kind data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

REFUSAL_MESSAGE = "WE GET IT, YOU WANT A SHORT FORTUNE"

OutcomeKind = Literal["quote", "refusal", "empty"]


@dataclass(slots=True)
class Candidate:
    """A corpus file eligible for weighted selection."""

    path: Path
    size: int


@dataclass(slots=True)
class SearchMatch:
    """A quote that contained the search pattern, with the file it came from."""

    path: Path
    text: str


@dataclass(slots=True, frozen=True)
class QuoteOutcome:
    """Result of one random-pick request.

    ``quote`` carries the selected text, ``refusal`` means the shortness level
    hit the reserved maximum, ``empty`` means the chosen file held no quotes.
    """

    kind: OutcomeKind
    text: Optional[str] = None

    @classmethod
    def quote(cls, text: str) -> "QuoteOutcome":
        return cls("quote", text)

    @classmethod
    def refusal(cls) -> "QuoteOutcome":
        return cls("refusal")

    @classmethod
    def empty(cls) -> "QuoteOutcome":
        return cls("empty")

    def render(self) -> Optional[str]:
        if self.kind == "refusal":
            return REFUSAL_MESSAGE
        return self.text
