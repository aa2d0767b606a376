"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod


class Display(ABC):
    """Abstract base for display implementations."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message.

        Args:
            message: Warning text
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def output(self, text: str, **kwargs) -> None:
        """Write primary output (notice lines, difference reports).

        Args:
            text: Text written verbatim, newline-terminated
            kwargs: Implementation-specific options
        """
        pass
