"""Binary diff engine."""

from pathlib import Path

import bsdiff4

from .DiffEngine import DiffEngine


class Bsdiff4Engine(DiffEngine):
    """Binary diff engine using bsdiff4 Python package."""

    def diff(self, file1: Path, file2: Path, options: dict) -> str:  # noqa: ARG002
        """Compute binary diff using bsdiff4.

        Args:
            file1: Previous version
            file2: Current version
            options: Options (currently unused for binary diff)

        Returns:
            Patch summary, empty when the files are identical

        Raises:
            RuntimeError: If the files cannot be read or the diff operation fails
        """
        try:
            old_data = file1.read_bytes()
            new_data = file2.read_bytes()
        except OSError as exc:
            raise RuntimeError(f"Failed to read files: {exc}") from exc

        if old_data == new_data:
            return ""

        try:
            patch = bsdiff4.diff(old_data, new_data)
        except Exception as exc:
            raise RuntimeError(f"bsdiff4 diff operation failed: {exc}") from exc

        patch_size = len(patch)
        size1 = len(old_data)
        size2 = len(new_data)

        return (
            "Binary diff (bsdiff4 patch):\n"
            f"  {file1}: {size1} bytes\n"
            f"  {file2}: {size2} bytes\n"
            f"  Patch size: {patch_size} bytes\n"
            f"  Compression ratio: {patch_size / max(size1, size2) * 100:.1f}%\n"
        )
