"""Shared pytest configuration and fixtures for all tests."""

import json
import os
from pathlib import Path

import pytest

from snapdiff.api.version.VersionRecord import VersionRecord
from snapdiff.api.version.VersionSource import VersionSource
from snapdiff.utils.display.Display import Display


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external tools beyond diff")
    config.addinivalue_line("markers", "integration: tests driving the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid snapdiff configuration dict for testing."""
    return {
        "source": {
            "type": "httm",
            "httm_command": "httm",
            "datasets": [],
            "snapshot_subdir": ".zfs/snapshot",
        },
        "diff": {
            "engine": "auto",
            "context_lines": 3,
            "ignore_whitespace": False,
            "diff_command": "diff",
        },
        "log": {
            "level": "DEBUG",
        },
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture(autouse=True)
def snapdiff_home(tmp_path: Path, monkeypatch) -> Path:
    """Point SNAPDIFF_HOME at a per-test directory so nothing touches ~/.snapdiff."""
    home = tmp_path / ".snapdiff"
    home.mkdir()
    monkeypatch.setenv("SNAPDIFF_HOME", str(home))
    return home


@pytest.fixture
def write_config(snapdiff_home: Path):
    """Write a config dict to $SNAPDIFF_HOME/config.json."""

    def _write(config: dict) -> Path:
        path = snapdiff_home / "config.json"
        path.write_text(json.dumps(config, indent=2), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Version Helpers
# =============================================================================


class StaticVersionSource(VersionSource):
    """Version source answering from a prepared mapping."""

    def __init__(self, versions: dict[Path, list[VersionRecord]] | None = None):
        self.versions = versions or {}
        self.queries: list[Path] = []

    def list_versions(self, path: Path) -> list[VersionRecord]:
        self.queries.append(path)
        return list(self.versions.get(path, []))


class RecordingDisplay(Display):
    """Display collecting everything it is given."""

    def __init__(self):
        self.outputs: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def error(self, message: str, **kwargs) -> None:
        self.errors.append(message)

    def warning(self, message: str, **kwargs) -> None:
        self.warnings.append(message)

    def output(self, text: str, **kwargs) -> None:
        self.outputs.append(text)


@pytest.fixture
def static_source() -> type[StaticVersionSource]:
    return StaticVersionSource


@pytest.fixture
def recording_display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def write_versions(tmp_path: Path):
    """Create one file per content under snapshot-like directories.

    Modify times increase with position (base 1_000_000, step 100s).
    Returns the records oldest first.
    """

    def _write(contents: list[str], name: str = "notes.txt", root: Path | None = None) -> list[VersionRecord]:
        base = root or tmp_path / "snapshots"
        records = []
        for i, content in enumerate(contents):
            location = base / f"snap-{i + 1}" / name
            location.parent.mkdir(parents=True, exist_ok=True)
            location.write_text(content, encoding="utf-8")
            mtime = 1_000_000 + 100 * i
            os.utime(location, (mtime, mtime))
            records.append(VersionRecord.from_path(location))
        return records

    return _write


@pytest.fixture
def snapshot_dataset(tmp_path: Path):
    """Build a dataset with ``.zfs/snapshot/<name>/`` directories.

    Returns a function taking ``{snapshot_name: (content, mtime)}`` for the
    file at ``relative`` and returning ``(dataset, live_path)``.
    """

    def _build(
        snapshots: dict[str, tuple[str, int]],
        relative: str = "docs/notes.txt",
        live: tuple[str, int] | None = ("live contents\n", 9_000_000),
    ) -> tuple[Path, Path]:
        dataset = tmp_path / "tank"
        snap_root = dataset / ".zfs" / "snapshot"
        snap_root.mkdir(parents=True, exist_ok=True)
        for snap_name, (content, mtime) in snapshots.items():
            copy = snap_root / snap_name / relative
            copy.parent.mkdir(parents=True, exist_ok=True)
            copy.write_text(content, encoding="utf-8")
            os.utime(copy, (mtime, mtime))

        live_path = dataset / relative
        live_path.parent.mkdir(parents=True, exist_ok=True)
        if live is not None:
            live_path.write_text(live[0], encoding="utf-8")
            os.utime(live_path, (live[1], live[1]))
        return dataset.resolve(), live_path.resolve()

    return _build
