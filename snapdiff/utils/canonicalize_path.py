"""Canonicalize a user-supplied path string.

Expands user home directory (~) and resolves symlinks. Unlike a plain
normalization, the result must name something that exists: callers rely on
this to fail fast on typos.
"""

from pathlib import Path


def canonicalize_path(path_str: str, allow_missing: bool = False) -> Path:
    """Canonicalize a path string.

    Args:
        path_str: Path string to canonicalize (may include ~)
        allow_missing: Accept a path whose final component does not exist as
            long as its parent directory resolves (deleted files)

    Returns:
        Canonical absolute path

    Raises:
        FileNotFoundError: If the path (or, with allow_missing, its parent) does not exist
        OSError: If resolution fails (symlink loop, permission denied)
        ValueError: If path_str is empty

    Examples:
        >>> canonicalize_path("~/Documents/file.txt")
        PosixPath('/home/user/Documents/file.txt')
    """
    if not path_str:
        raise ValueError("empty path")

    path_obj = Path(path_str).expanduser()
    try:
        return path_obj.resolve(strict=True)
    except FileNotFoundError:
        if not allow_missing:
            raise
        # Parent must still be real; only the leaf may be gone.
        return path_obj.parent.resolve(strict=True) / path_obj.name
