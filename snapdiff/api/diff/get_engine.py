"""Engine lookup by configured name."""

from ._ENGINES import ENGINES
from .DiffEngine import DiffEngine


def get_engine(name: str) -> DiffEngine | None:
    """Return the registered engine for a DiffConfig engine name ("myers" or "bsdiff4").

    "auto" is not registered; callers resolve it per pair first.
    """
    return ENGINES.get(name)
