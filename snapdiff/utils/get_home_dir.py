"""Get snapdiff home directory path or path under it."""

import os
from pathlib import Path


def get_home_dir(*parts: str) -> Path:
    """Get snapdiff home directory path or path under it.

    Checks SNAPDIFF_HOME environment variable first, defaults to ~/.snapdiff if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to snapdiff home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.snapdiff")
        >>> get_home_dir("config.json")
        Path("/home/user/.snapdiff/config.json")
    """
    home_env = os.environ.get("SNAPDIFF_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / ".snapdiff"

    return home / Path(*parts) if parts else home
