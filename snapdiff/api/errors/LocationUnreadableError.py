"""Raised when a version location cannot be read for comparison."""

from pathlib import Path

from .SnapdiffError import SnapdiffError


class LocationUnreadableError(SnapdiffError):
    """A specific version location cannot be read."""

    kind = "LocationUnreadable"

    def __init__(self, location: Path, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read {location}: {reason}")
