"""Version source backed by the httm command."""

import subprocess
from pathlib import Path

from ...utils.logger import get_logger
from ..errors.VersionSourceError import VersionSourceError
from .VersionRecord import VersionRecord
from .VersionSource import VersionSource

logger = get_logger("version.httm")


class HttmVersionSource(VersionSource):
    """Ask httm for the unique snapshot versions of a file.

    httm deduplicates by modify time and size and prints the live file after
    the snapshot versions; the live path is dropped here so records are
    historical only.
    """

    def __init__(self, command: str = "httm"):
        self.command = command

    def list_versions(self, path: Path) -> list[VersionRecord]:
        lines = self._run(["-n", "--omit-ditto", str(path)], path)
        return [VersionRecord.from_path(line) for line in lines if Path(line) != path]

    def last_version(self, path: Path) -> VersionRecord | None:
        lines = self._run(["--omit-ditto", "--last-snap", "--raw", str(path)], path)
        for line in lines:
            if Path(line) != path:
                return VersionRecord.from_path(line)
        return None

    def _run(self, args: list[str], path: Path) -> list[str]:
        cmd = [self.command, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise VersionSourceError(path, f"cannot run {self.command}: {exc}") from exc

        if result.returncode != 0:
            detail = result.stderr.strip() or f"{self.command} exited with status {result.returncode}"
            raise VersionSourceError(path, detail)

        return [line for line in result.stdout.splitlines() if line.strip()]
