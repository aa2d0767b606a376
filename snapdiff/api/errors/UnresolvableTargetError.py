"""Raised when an input path cannot be canonicalized."""

from .SnapdiffError import SnapdiffError


class UnresolvableTargetError(SnapdiffError):
    """Input path cannot be canonicalized or does not exist."""

    kind = "UnresolvableTarget"

    def __init__(self, raw_path: str, reason: str | None = None):
        self.raw_path = raw_path
        self.reason = reason
        message = f"Could not determine canonical path for: {raw_path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
