"""ghopac - keep local clones of GitHub organization repositories up to date.

Clones every repository of the configured organizations that is missing
locally, pulls the ones that exist, and pulls standalone syncpoints, all
across a bounded pool of parallel git workers.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "GhopacConfig",
    "SyncEngine",
    "SyncResult",
    "SyncTarget",
    "load_config",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("GhopacConfig", "load_config"):
        from ghopac import config

        return getattr(config, name)
    if name in ("SyncEngine", "SyncResult", "SyncTarget"):
        from ghopac import sync

        return getattr(sync, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
