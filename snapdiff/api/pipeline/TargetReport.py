"""Per-target outcome of a pipeline run."""

from dataclasses import dataclass, field

from ..version.FileTarget import FileTarget


@dataclass
class TargetReport:
    """What happened to one user-supplied path."""

    raw: str
    target: FileTarget | None = None
    comparisons: int = 0
    differing: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.target is not None
