"""Exceptions raised while reading a fortune corpus."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CorpusError(Exception):
    """Base exception for corpus failures. Always fatal for the invocation."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)


class CorpusNotFoundError(CorpusError):
    """Raised when a corpus location does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"The path {path} does not exist.")

    @property
    def hint(self) -> str:
        return "Set FORTUNE_DIR (or FORTUNE_OFF_DIR) or pass --dir to point at your fortune files."


class CorpusReadError(CorpusError):
    """Raised when a corpus location exists but cannot be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, f"Could not read {path}: {cause.strerror or cause}")


class EmptyCorpusError(CorpusError):
    """Raised when there is nothing to weight-select from."""

    def __init__(self, locations: Sequence[Path]) -> None:
        self.locations = list(locations) or [Path(".")]
        names = ", ".join(str(location) for location in self.locations)
        super().__init__(self.locations[0], f"No valid files found in {names}")
