"""Unit tests for snapdiff.api.diff.MyersEngine module."""

import importlib
from unittest.mock import MagicMock, patch

import pytest

from snapdiff.api.diff.MyersEngine import MyersEngine

pytestmark = pytest.mark.unit

myers_module = importlib.import_module("snapdiff.api.diff.MyersEngine")


class TestMyersEngine:
    """Test MyersEngine."""

    def test_diff_identical_text_files(self, tmp_path):
        """Identical files give an empty report."""
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_text("line 1\nline 2\nline 3\n")
        file2.write_text("line 1\nline 2\nline 3\n")

        assert MyersEngine().diff(file1, file2, {}) == ""

    def test_diff_different_text_files(self, tmp_path):
        """Changed lines show up as removal and insertion."""
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_text("line 1\nline 2\nline 3\n")
        file2.write_text("line 1\nmodified line 2\nline 3\n")

        result = MyersEngine().diff(file1, file2, {"context_lines": 1})

        assert "-line 2" in result
        assert "+modified line 2" in result
        assert str(file1) in result
        assert str(file2) in result

    def test_context_lines_zero_drops_context(self, tmp_path):
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_text("keep\nold\nkeep too\n")
        file2.write_text("keep\nnew\nkeep too\n")

        result = MyersEngine().diff(file1, file2, {"context_lines": 0})

        assert "-old" in result
        assert "+new" in result
        assert " keep" not in result

    def test_ignore_whitespace(self, tmp_path):
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_text("a b\n")
        file2.write_text("a    b\n")

        assert MyersEngine().diff(file1, file2, {"ignore_whitespace": True}) == ""
        assert "+a    b" in MyersEngine().diff(file1, file2, {})

    def test_diff_binary_file_fails(self, tmp_path):
        file1 = tmp_path / "file1.bin"
        file2 = tmp_path / "file2.txt"
        file1.write_bytes(b"\x00\x01\x02\x03")
        file2.write_text("text content")

        with pytest.raises(ValueError, match="not a text file"):
            MyersEngine().diff(file1, file2, {})

    def test_diff_file2_binary_fails(self, tmp_path):
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.bin"
        file1.write_text("text content")
        file2.write_bytes(b"\x00\x01\x02\x03")

        with pytest.raises(ValueError, match="not a text file"):
            MyersEngine().diff(file1, file2, {})

    @patch.object(myers_module.subprocess, "run")
    def test_diff_command_fails_returncode_2(self, mock_run, tmp_path):
        """RuntimeError when diff exits with 2 or more."""
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_text("a\n")
        file2.write_text("b\n")
        mock_run.return_value = MagicMock(returncode=2, stdout="", stderr="diff: trouble")

        with pytest.raises(RuntimeError, match="diff command failed: diff: trouble"):
            MyersEngine().diff(file1, file2, {})

    def test_missing_diff_command(self, tmp_path):
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_text("a\n")
        file2.write_text("b\n")

        with pytest.raises(RuntimeError, match="diff error"):
            MyersEngine().diff(file1, file2, {"diff_command": "snapdiff-no-such-diff-binary"})

    def test_non_utf8_bytes_after_sniffed_head(self, tmp_path):
        """Bytes past the text check are replaced, not fatal."""
        head = b"plain ascii line\n" * 600
        file1 = tmp_path / "file1.txt"
        file2 = tmp_path / "file2.txt"
        file1.write_bytes(head + b"caf\xe9 old\n")
        file2.write_bytes(head + b"caf\xe9 new\n")

        result = MyersEngine().diff(file1, file2, {"context_lines": 0})

        assert "-caf\ufffd old" in result
        assert "+caf\ufffd new" in result
