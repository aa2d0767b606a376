"""Diff module - File comparison operations."""

from ._ENGINES import ENGINES
from .DiffConfig import DiffConfig
from .DiffController import DiffController
from .DiffEngine import DiffEngine
from .DiffResult import DiffResult
from .get_engine import get_engine

__all__ = [
    "ENGINES",
    "DiffConfig",
    "DiffController",
    "DiffEngine",
    "DiffResult",
    "get_engine",
]
