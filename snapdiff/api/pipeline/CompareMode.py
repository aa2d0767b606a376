"""Which version pairs a run compares."""

from enum import Enum


class CompareMode(str, Enum):
    """Comparison mode.

    LAST compares the newest distinct version with the live file; ALL
    compares every adjacent pair of distinct versions.
    """

    LAST = "last"
    ALL = "all"
