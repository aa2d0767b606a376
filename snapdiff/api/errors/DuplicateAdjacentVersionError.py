"""Raised when a version source returns two identical adjacent versions."""

from pathlib import Path

from .SnapdiffError import SnapdiffError


class DuplicateAdjacentVersionError(SnapdiffError):
    """Adjacent versions share modify time and size."""

    kind = "DuplicateAdjacentVersion"

    def __init__(self, previous: Path, current: Path):
        self.previous = previous
        self.current = current
        super().__init__(f"Versions {previous} and {current} are duplicates, skipping comparison")
