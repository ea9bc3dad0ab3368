# ghopac Path Utilities
# XDG base directory lookup and filesystem helpers

import os
from pathlib import Path
from typing import Optional

XDG_DEFAULT_CONFIG_DIRS = "/etc/xdg"


class HomeDirectoryError(RuntimeError):
    """Raised when the invoking user's home directory cannot be determined."""


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables, then anchor relative paths at the cwd."""
    return Path(os.path.expandvars(str(path))).expanduser().absolute()


def xdg_config_home() -> Path:
    """
    Get $XDG_CONFIG_HOME, falling back to ~/.config.

    Raises:
        HomeDirectoryError: If XDG_CONFIG_HOME is unset and the home
                            directory cannot be determined.
    """
    value = os.environ.get("XDG_CONFIG_HOME", "").strip()
    if value:
        return Path(value)
    try:
        return Path.home() / ".config"
    except (KeyError, RuntimeError) as e:
        raise HomeDirectoryError(
            f"Unable to determine current user, please set XDG_CONFIG_HOME explicitly. Error: {e}"
        ) from e


def xdg_config_dirs() -> list[Path]:
    """Get the absolute entries of $XDG_CONFIG_DIRS (default /etc/xdg)."""
    value = os.environ.get("XDG_CONFIG_DIRS", "").strip() or XDG_DEFAULT_CONFIG_DIRS
    return [Path(entry) for entry in value.split(os.pathsep) if entry and os.path.isabs(entry)]


def closest_existing_dir(path: Path) -> Optional[Path]:
    """
    Find the nearest ancestor of path (path itself included) that is a directory.

    Args:
        path: Starting path.

    Returns:
        The closest existing directory, or None if there is none.
    """
    for candidate in (path, *path.parents):
        if candidate.is_dir():
            return candidate
    return None
