from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Token:
    """A parsed dictionary entry."""

    text: str
    frequency: float = 0.0
    pos: str = ""


@dataclass(slots=True)
class ParseStats:
    """Counters for a single parse run."""

    lines_read: int = 0
    tokens: int = 0
    skipped: int = 0


@dataclass(slots=True)
class LoadResult:
    """Outcome of a successful dictionary load."""

    path: Path
    stats: ParseStats = field(default_factory=ParseStats)
