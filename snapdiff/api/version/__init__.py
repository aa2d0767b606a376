"""Version module - historical versions of live files."""

from .FileTarget import FileTarget
from .get_version_source import get_version_source
from .HttmVersionSource import HttmVersionSource
from .SnapshotDirVersionSource import SnapshotDirVersionSource
from .VersionRecord import VersionRecord
from .VersionSource import VersionSource
from .VersionSourceConfig import VersionSourceConfig

__all__ = [
    "FileTarget",
    "HttmVersionSource",
    "SnapshotDirVersionSource",
    "VersionRecord",
    "VersionSource",
    "VersionSourceConfig",
    "get_version_source",
]
