"""Raised when the version source cannot list versions for a path."""

from pathlib import Path

from .SnapdiffError import SnapdiffError


class VersionSourceError(SnapdiffError):
    """Version source query failed for a path."""

    kind = "VersionSourceUnavailable"

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not list versions of {path}: {reason}")
