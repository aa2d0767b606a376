"""Text/binary sniffing shared by the engines."""

from pathlib import Path


def _is_text_file(file_path: Path) -> bool:
    """Check if file is text with supported encoding.

    Args:
        file_path: Path to file

    Returns:
        True if file is text, False otherwise (including unreadable files)
    """
    try:
        # Read first chunk to check for binary content
        with file_path.open("rb") as f:
            chunk = f.read(8192)
    except OSError:
        return False

    # Check for null bytes (binary indicator)
    if b"\x00" in chunk:
        return False

    try:
        chunk.decode("utf-8")
        return True
    except UnicodeDecodeError as exc:
        # Multibyte character cut by the chunk boundary
        return exc.reason == "unexpected end of data"
