"""Diff result dataclass."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DiffResult:
    """Outcome of comparing two version locations.

    Produced and consumed immediately; never persisted.
    """

    location_a: Path
    location_b: Path
    differs: bool
    report: str = ""
    engine: str | None = None
