"""Get doclinks home directory path or path under it."""

import os
from pathlib import Path

DOCLINKS_HOME_EXT = ".doclinks"


def get_home_dir(*parts: str) -> Path:
    """Get doclinks home directory path or path under it.

    If no parts are provided, returns the base home directory.
    If parts are provided, returns a path under the home directory.

    Checks DOCLINKS_HOME environment variable first, defaults to ~/.doclinks if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.doclinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.doclinks/config.json")
    """
    home_env = os.environ.get("DOCLINKS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME is checked explicitly for test isolation
        user_home = os.environ.get("HOME")
        home = Path(user_home) / DOCLINKS_HOME_EXT if user_home else Path.home() / DOCLINKS_HOME_EXT

    return home / Path(*parts) if parts else home
