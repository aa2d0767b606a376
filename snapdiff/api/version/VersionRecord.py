"""One historical version of a file."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class VersionRecord:
    """A historical version location plus the metadata used to order it."""

    location: Path
    timestamp: float | None = None
    size: int | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> "VersionRecord":
        """Build a record from a location, stat'ing it for modify time and size.

        A location that cannot be stat'ed keeps unknown metadata; reading it is
        left to the comparison, which reports it properly.
        """
        location = Path(path)
        try:
            st = location.stat()
        except OSError:
            return cls(location=location)
        return cls(location=location, timestamp=st.st_mtime, size=st.st_size)

    def same_metadata(self, other: "VersionRecord") -> bool:
        """True when both modify time and size are known and equal."""
        if self.timestamp is None or self.size is None:
            return False
        return self.timestamp == other.timestamp and self.size == other.size
