"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal

from fortune_kind.corpus.length import SHORT

CorpusKind = Literal["kind", "unkind", "all"]

FORTUNE_DIR = "fortunes"
FORTUNE_OFF_DIR = "fortunes_off"


def _get_default_dir(env_var: str, fallback: str) -> Path:
    """Read a corpus directory from the environment, or use the fallback."""
    value = os.environ.get(env_var)
    return Path(value) if value else Path(fallback)


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    fortune_dir: Path | None = None
    fortune_off_dir: Path | None = None
    short_length: int = SHORT

    def __post_init__(self) -> None:
        if self.fortune_dir is None:
            self.fortune_dir = _get_default_dir("FORTUNE_DIR", FORTUNE_DIR)
        if self.fortune_off_dir is None:
            self.fortune_off_dir = _get_default_dir("FORTUNE_OFF_DIR", FORTUNE_OFF_DIR)

    def resolve_fortune_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(Path(self.fortune_dir), base_dir)

    def resolve_fortune_off_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(Path(self.fortune_off_dir), base_dir)

    def locations(self, kind: CorpusKind = "kind", base_dir: Path | None = None) -> List[Path]:
        """Corpus locations to read for a selection kind, default corpus first."""
        if kind == "kind":
            return [self.resolve_fortune_dir(base_dir)]
        if kind == "unkind":
            return [self.resolve_fortune_off_dir(base_dir)]
        if kind == "all":
            return [self.resolve_fortune_dir(base_dir), self.resolve_fortune_off_dir(base_dir)]
        raise ValueError(f"Unknown corpus kind: {kind}")
