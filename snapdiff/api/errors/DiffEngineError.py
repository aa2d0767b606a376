"""Raised when a diff engine fails to produce a report."""

from .SnapdiffError import SnapdiffError


class DiffEngineError(SnapdiffError):
    """Diff engine failed for a comparison pair."""

    kind = "DiffFailed"
