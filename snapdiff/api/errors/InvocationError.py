"""Raised when no usable input was provided."""

from .SnapdiffError import SnapdiffError


class InvocationError(SnapdiffError):
    """No usable input provided."""

    kind = "InvocationError"
