"""Version source reading snapshot directories of configured datasets."""

from collections.abc import Iterable
from pathlib import Path

from ...utils.logger import get_logger
from ..errors.VersionSourceError import VersionSourceError
from .VersionRecord import VersionRecord
from .VersionSource import VersionSource

logger = get_logger("version.snapshot_dir")


class SnapshotDirVersionSource(VersionSource):
    """Look a file up in every snapshot of its dataset.

    Each dataset mount point holds one directory per snapshot under
    ``snapshot_subdir`` (``.zfs/snapshot`` on ZFS). Datasets are configured,
    never detected.
    """

    def __init__(self, datasets: Iterable[Path | str], snapshot_subdir: str = ".zfs/snapshot"):
        resolved = {Path(d).expanduser().resolve() for d in datasets}
        # Deepest first so the most proximate dataset wins
        self.datasets = sorted(resolved, key=lambda p: (-len(p.parts), str(p)))
        self.snapshot_subdir = snapshot_subdir

    def proximate_dataset(self, path: Path) -> Path:
        """Deepest configured dataset containing ``path``."""
        for dataset in self.datasets:
            if path == dataset or dataset in path.parents:
                return dataset
        raise VersionSourceError(path, "not on a configured dataset")

    def snapshot_mounts(self, dataset: Path) -> list[Path]:
        """Snapshot directories of ``dataset``, sorted by name."""
        snap_root = dataset / self.snapshot_subdir
        try:
            return sorted(entry for entry in snap_root.iterdir() if entry.is_dir())
        except FileNotFoundError:
            logger.info("No snapshot directory at %s", snap_root)
            return []
        except PermissionError as exc:
            raise VersionSourceError(dataset, f"permission denied reading {snap_root}") from exc
        except OSError as exc:
            raise VersionSourceError(dataset, f"cannot read {snap_root}: {exc}") from exc

    def list_versions(self, path: Path) -> list[VersionRecord]:
        dataset = self.proximate_dataset(path)
        relative = path.relative_to(dataset)

        candidates: list[VersionRecord] = []
        for mount in self.snapshot_mounts(dataset):
            candidate = mount / relative
            try:
                st = candidate.stat()
            except PermissionError as exc:
                raise VersionSourceError(path, f"permission denied reading {candidate}") from exc
            except OSError:
                # No copy of the file in this snapshot
                continue
            candidates.append(VersionRecord(location=candidate, timestamp=st.st_mtime, size=st.st_size))

        versions = self._sort_dedup(candidates)
        logger.debug("%d snapshot copies, %d distinct for %s", len(candidates), len(versions), path)
        return self._omit_ditto(path, versions)

    @staticmethod
    def _sort_dedup(records: list[VersionRecord]) -> list[VersionRecord]:
        """Order by modify time and drop copies sharing modify time and size."""
        seen: set[tuple[float | None, int | None]] = set()
        unique: list[VersionRecord] = []
        for record in sorted(records, key=lambda r: (r.timestamp or 0.0, r.size or 0, str(r.location))):
            key = (record.timestamp, record.size)
            if key in seen:
                continue
            seen.add(key)
            unique.append(record)
        return unique

    @staticmethod
    def _omit_ditto(path: Path, versions: list[VersionRecord]) -> list[VersionRecord]:
        """Drop the newest version when the live file matches it."""
        if versions and VersionRecord.from_path(path).same_metadata(versions[-1]):
            return versions[:-1]
        return versions
