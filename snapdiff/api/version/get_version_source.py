"""Build the configured version source."""

from .HttmVersionSource import HttmVersionSource
from .SnapshotDirVersionSource import SnapshotDirVersionSource
from .VersionSource import VersionSource
from .VersionSourceConfig import VersionSourceConfig


def get_version_source(config: VersionSourceConfig) -> VersionSource:
    """Get version source for the configured backend.

    Args:
        config: Version source configuration

    Returns:
        VersionSource instance

    Raises:
        ValueError: If the backend is unknown or incompletely configured
    """
    if config.type == "httm":
        return HttmVersionSource(config.httm_command)

    if config.type == "snapshot_dir":
        if not config.datasets:
            raise ValueError(
                "source.datasets must list at least one dataset mount point "
                "(found: [], expected: e.g. [\"/tank/home\"])"
            )
        return SnapshotDirVersionSource(config.datasets, config.snapshot_subdir)

    raise ValueError(f"Unknown version source: {config.type!r}")
