"""Base class for snapdiff errors."""


class SnapdiffError(Exception):
    """Base class for all snapdiff errors.

    Subclasses set ``kind`` to the name shown on the error stream.
    """

    kind = "SnapdiffError"

    def __str__(self) -> str:
        return f"{self.kind}: {super().__str__()}"
