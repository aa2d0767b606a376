"""Pipeline controller: version lists in, difference reports out."""

from collections.abc import Sequence
from itertools import pairwise
from pathlib import Path

from ...utils.display.Display import Display
from ...utils.logger import get_logger
from ..diff.DiffController import DiffController
from ..errors.DiffEngineError import DiffEngineError
from ..errors.DuplicateAdjacentVersionError import DuplicateAdjacentVersionError
from ..errors.InvocationError import InvocationError
from ..errors.LocationUnreadableError import LocationUnreadableError
from ..errors.SnapdiffError import SnapdiffError
from ..errors.UnresolvableTargetError import UnresolvableTargetError
from ..errors.VersionSourceError import VersionSourceError
from ..version.FileTarget import FileTarget
from ..version.VersionRecord import VersionRecord
from ..version.VersionSource import VersionSource
from .CompareMode import CompareMode
from .TargetReport import TargetReport

logger = get_logger("pipeline")


class PipelineController:
    """Run version lists for each target through the diff controller.

    Targets are processed one after the other in input order. Errors below
    the run level are reported on the display and never abort the batch.
    """

    def __init__(
        self,
        source: VersionSource,
        diff_controller: DiffController,
        display: Display,
        allow_missing: bool = False,
        with_live: bool = False,
    ):
        """Initialize pipeline controller.

        Args:
            source: Version lister queried once per target
            diff_controller: Compares version pairs
            display: Display receiving diff output and error lines
            allow_missing: Accept targets whose live file was deleted
            with_live: In ALL mode, also compare the newest version with the live file
        """
        self.source = source
        self.diff_controller = diff_controller
        self.display = display
        self.allow_missing = allow_missing
        self.with_live = with_live

    def run(self, targets: Sequence[str], mode: CompareMode = CompareMode.LAST) -> int:
        """Process every target and return the exit status.

        Returns:
            0 if at least one target resolved, 1 if all of them failed to resolve

        Raises:
            InvocationError: If no targets were given
        """
        if not targets:
            raise InvocationError("no file paths given")

        reports = [self.process_target(raw, mode) for raw in targets]
        resolved = sum(1 for report in reports if report.resolved)
        logger.info(
            "Processed %d target(s) in %s mode: %d resolved, %d differing comparison(s)",
            len(reports),
            mode.value,
            resolved,
            sum(report.differing for report in reports),
        )
        return 0 if resolved else 1

    def process_target(self, raw: str, mode: CompareMode) -> TargetReport:
        """Resolve one path, query its versions and emit its comparisons."""
        report = TargetReport(raw=raw)

        try:
            report.target = FileTarget.resolve(raw, allow_missing=self.allow_missing)
        except UnresolvableTargetError as exc:
            self._report_error(report, exc)
            return report

        try:
            if mode is CompareMode.ALL:
                self._compare_all(report, report.target)
            else:
                self._compare_last(report, report.target)
        except VersionSourceError as exc:
            self._report_error(report, exc)

        return report

    def _compare_last(self, report: TargetReport, target: FileTarget) -> None:
        if target.live_exists:
            previous = self.source.last_version(target.path)
            if previous is None:
                self._warn(f"No prior version of {target.path}")
                return
            target.versions = [previous]
            self._compare(report, previous.location, target.path)
            return

        # Live file is gone: fall back to the two newest versions
        target.versions = self.source.list_versions(target.path)
        if len(target.versions) < 2:
            self._warn(f"Live file {target.path} is missing and fewer than two versions exist")
            return
        self._compare(report, target.versions[-2].location, target.versions[-1].location)

    def _compare_all(self, report: TargetReport, target: FileTarget) -> None:
        target.versions = self.source.list_versions(target.path)

        subjects = list(target.versions)
        if self.with_live and target.live_exists:
            live = VersionRecord.from_path(target.path)
            if not subjects or not subjects[-1].same_metadata(live):
                subjects.append(live)

        if len(subjects) < 2:
            logger.debug("Fewer than two distinct versions of %s", target.path)
            return

        # Each step's current version becomes the next step's previous one
        for previous, current in pairwise(subjects):
            if previous.same_metadata(current):
                self._report_error(report, DuplicateAdjacentVersionError(previous.location, current.location))
                continue
            self._compare(report, previous.location, current.location)

    def _compare(self, report: TargetReport, previous: Path, current: Path) -> None:
        try:
            result = self.diff_controller.compare(previous, current)
        except (LocationUnreadableError, DiffEngineError) as exc:
            self._report_error(report, exc, pair=(previous, current))
            return

        report.comparisons += 1
        if not result.differs:
            logger.debug("No difference between %s and %s", previous, current)
            return

        report.differing += 1
        self.display.output(f"Files {previous} and {current} differ")
        if result.report:
            self.display.output(result.report)

    def _report_error(
        self,
        report: TargetReport,
        exc: SnapdiffError,
        pair: tuple[Path, Path] | None = None,
    ) -> None:
        message = str(exc)
        if pair is not None:
            message = f"{message} (comparing {pair[0]} and {pair[1]})"
        report.errors.append(message)
        logger.warning(message)
        self.display.error(message)

    def _warn(self, message: str) -> None:
        logger.info(message)
        self.display.warning(message)
