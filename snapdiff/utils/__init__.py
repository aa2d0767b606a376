"""snapdiff utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule (logger.py excepted).
"""

from .canonicalize_path import canonicalize_path
from .get_home_dir import get_home_dir
from .logger import configure_logging, get_logger

__all__ = [
    "canonicalize_path",
    "configure_logging",
    "get_home_dir",
    "get_logger",
]
