"""Error kinds raised by snapdiff."""

from .DiffEngineError import DiffEngineError
from .DuplicateAdjacentVersionError import DuplicateAdjacentVersionError
from .InvocationError import InvocationError
from .LocationUnreadableError import LocationUnreadableError
from .SnapdiffError import SnapdiffError
from .UnresolvableTargetError import UnresolvableTargetError
from .VersionSourceError import VersionSourceError

__all__ = [
    "DiffEngineError",
    "DuplicateAdjacentVersionError",
    "InvocationError",
    "LocationUnreadableError",
    "SnapdiffError",
    "UnresolvableTargetError",
    "VersionSourceError",
]
