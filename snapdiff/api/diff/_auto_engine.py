"""Auto engine selection for diff operations."""

from pathlib import Path

from ._is_text_file import _is_text_file


def select_auto_diff_engine(file1: Path, file2: Path) -> str:
    """Select diff engine automatically based on file contents.

    Args:
        file1: Path to first file
        file2: Path to second file

    Returns:
        Engine name: "myers" or "bsdiff4"
    """
    if _is_text_file(file1) and _is_text_file(file2):
        return "myers"

    return "bsdiff4"


__all__ = ["select_auto_diff_engine"]
