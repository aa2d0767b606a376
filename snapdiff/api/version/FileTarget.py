"""A live file and its historical versions."""

from dataclasses import dataclass, field
from pathlib import Path

from ...utils.canonicalize_path import canonicalize_path
from ..errors.UnresolvableTargetError import UnresolvableTargetError
from .VersionRecord import VersionRecord


@dataclass
class FileTarget:
    """Canonical path to a live file plus its ordered versions (oldest first)."""

    path: Path
    versions: list[VersionRecord] = field(default_factory=list)

    @classmethod
    def resolve(cls, raw_path: str, allow_missing: bool = False) -> "FileTarget":
        """Canonicalize a user-supplied path.

        Args:
            raw_path: Path as typed by the user
            allow_missing: Accept a deleted file whose directory still exists

        Raises:
            UnresolvableTargetError: If the path cannot be canonicalized or does not exist
        """
        try:
            path = canonicalize_path(raw_path, allow_missing=allow_missing)
        except (OSError, RuntimeError, ValueError) as exc:
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            raise UnresolvableTargetError(raw_path, reason) from exc
        return cls(path=path)

    @property
    def live_exists(self) -> bool:
        """Whether the live file exists right now."""
        return self.path.exists()
