"""Contract for version listers."""

from abc import ABC, abstractmethod
from pathlib import Path

from .VersionRecord import VersionRecord


class VersionSource(ABC):
    """Supplies the historical versions of a file.

    Implementations return versions oldest first with no two adjacent
    versions sharing content (omit-ditto), and raise VersionSourceError when
    the query itself fails. An empty list is a valid answer.
    """

    @abstractmethod
    def list_versions(self, path: Path) -> list[VersionRecord]:
        """List the distinct historical versions of ``path``, oldest first."""
        pass

    def last_version(self, path: Path) -> VersionRecord | None:
        """Most recent distinct version of ``path`` before now, if any."""
        versions = self.list_versions(path)
        return versions[-1] if versions else None
