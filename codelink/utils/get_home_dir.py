"""Get codelink home directory path or path under it."""

import os
from pathlib import Path

CODELINK_HOME_EXT = ".codelink"


def get_home_dir(*parts: str) -> Path:
    """Get codelink home directory path or path under it.

    Checks CODELINK_HOME environment variable first, defaults to ~/.codelink if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.codelink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.codelink/config.json")
    """
    home_env = os.environ.get("CODELINK_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / CODELINK_HOME_EXT

    return home / Path(*parts) if parts else home
