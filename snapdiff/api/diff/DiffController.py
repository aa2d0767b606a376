"""Diff controller with business logic."""

import os
from pathlib import Path
from typing import BinaryIO

from ...utils.logger import get_logger
from ..errors.DiffEngineError import DiffEngineError
from ..errors.LocationUnreadableError import LocationUnreadableError
from ._auto_engine import select_auto_diff_engine
from .DiffConfig import DiffConfig
from .DiffResult import DiffResult
from .get_engine import get_engine

logger = get_logger("diff")

_CHUNK_SIZE = 64 * 1024


class DiffController:
    """Compare two version locations and build the difference report."""

    def __init__(self, config: DiffConfig | None = None):
        """Initialize diff controller.

        Args:
            config: Engine selection and options; defaults apply when omitted
        """
        self.config = config or DiffConfig()

    def compare(self, location_a: Path | str, location_b: Path | str) -> DiffResult:
        """Compare two locations.

        ``differs`` is true iff the contents are not byte-identical. The report
        is only computed when they differ.

        Args:
            location_a: Previous version
            location_b: Current version

        Returns:
            DiffResult for the pair

        Raises:
            LocationUnreadableError: If either location cannot be read
            DiffEngineError: If the engine cannot produce a report
        """
        file_a = Path(location_a)
        file_b = Path(location_b)

        if self._identical(file_a, file_b):
            logger.debug("Identical: %s == %s", file_a, file_b)
            return DiffResult(location_a=file_a, location_b=file_b, differs=False)

        engine_name = self.config.engine
        if engine_name == "auto":
            engine_name = select_auto_diff_engine(file_a, file_b)

        engine = get_engine(engine_name)
        if engine is None:
            raise DiffEngineError(f"Unknown engine: {engine_name}")

        logger.debug("Diffing %s -> %s with %s", file_a, file_b, engine_name)
        try:
            report = engine.diff(file_a, file_b, self.config.engine_options())
        except (ValueError, RuntimeError) as exc:
            raise DiffEngineError(f"{engine_name} failed for {file_a} -> {file_b}: {exc}") from exc

        return DiffResult(location_a=file_a, location_b=file_b, differs=True, report=report, engine=engine_name)

    def _identical(self, file_a: Path, file_b: Path) -> bool:
        """Byte comparison, failing with LocationUnreadableError on the unreadable side."""
        with self._open(file_a) as fh_a, self._open(file_b) as fh_b:
            if os.path.samestat(os.fstat(fh_a.fileno()), os.fstat(fh_b.fileno())):
                return True
            if os.fstat(fh_a.fileno()).st_size != os.fstat(fh_b.fileno()).st_size:
                return False
            while True:
                chunk_a = self._read(fh_a, file_a)
                chunk_b = self._read(fh_b, file_b)
                if chunk_a != chunk_b:
                    return False
                if not chunk_a:
                    return True

    @staticmethod
    def _open(path: Path) -> BinaryIO:
        try:
            return path.open("rb")
        except OSError as exc:
            raise LocationUnreadableError(path, exc.strerror or str(exc)) from exc

    @staticmethod
    def _read(fh: BinaryIO, path: Path) -> bytes:
        try:
            return fh.read(_CHUNK_SIZE)
        except OSError as exc:
            raise LocationUnreadableError(path, exc.strerror or str(exc)) from exc
