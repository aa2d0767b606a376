"""Contract every snapshot diff engine fulfils."""

from abc import ABC, abstractmethod
from pathlib import Path


class DiffEngine(ABC):
    """Turns a pair of versions into a human-readable difference report."""

    @abstractmethod
    def diff(self, file1: Path, file2: Path, options: dict) -> str:
        """Describe how the current version changed from the previous one.

        Args:
            file1: Previous (older) version of the file
            file2: Current version, either a newer snapshot copy or the live file
            options: Settings from DiffConfig.engine_options()

        Returns:
            Report text, or an empty string when the engine sees no difference

        Raises:
            ValueError: If files don't meet engine requirements
            RuntimeError: If diff operation fails
        """
        pass
