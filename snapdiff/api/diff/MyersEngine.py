"""Text diff engine (UNO: single class)."""

import subprocess
from pathlib import Path

from .DiffEngine import DiffEngine
from ._is_text_file import _is_text_file


class MyersEngine(DiffEngine):
    """Text diff engine using Myers algorithm (via standard diff)."""

    def diff(self, file1: Path, file2: Path, options: dict) -> str:
        """Compute text diff using Myers algorithm.

        Args:
            file1: Previous version
            file2: Current version
            options: Options (context_lines, ignore_whitespace, diff_command)

        Returns:
            Unified diff output, empty when the files are identical

        Raises:
            ValueError: If files are not text
            RuntimeError: If diff command fails
        """
        if not _is_text_file(file1):
            raise ValueError(f"{file1} is not a text file or has unsupported encoding")
        if not _is_text_file(file2):
            raise ValueError(f"{file2} is not a text file or has unsupported encoding")

        context_lines = options.get("context_lines", 3)
        diff_command = options.get("diff_command", "diff")

        cmd = [diff_command, f"-U{context_lines}"]
        if options.get("ignore_whitespace", False):
            cmd.append("-w")
        cmd.extend([str(file1), str(file2)])

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                # Text sniffing reads only the head of each file
                errors="replace",
                check=False,  # diff returns 1 for differences, which is OK
            )
        except OSError as exc:
            raise RuntimeError(f"diff error: {exc}") from exc

        # Return code 0 = no differences, 1 = differences found, 2+ = error
        if result.returncode >= 2:
            raise RuntimeError(f"diff command failed: {result.stderr.strip()}")

        if result.returncode == 0:
            return ""

        return result.stdout
