# ghopac Utilities Module
# Helper functions for paths and host defaults

from ghopac.utils.paths import (
    HomeDirectoryError,
    closest_existing_dir,
    expand_path,
    xdg_config_dirs,
    xdg_config_home,
)
from ghopac.utils.platform import (
    get_cpu_count,
    resolve_concurrency,
)

__all__ = [
    # Platform
    "get_cpu_count",
    "resolve_concurrency",
    # Paths
    "HomeDirectoryError",
    "expand_path",
    "xdg_config_home",
    "xdg_config_dirs",
    "closest_existing_dir",
]
