# ghopac Platform Utilities
# Host-derived defaults

import os


def get_cpu_count() -> int:
    """
    Get the number of processing units available to this process.

    Returns:
        CPU count, never less than 1.
    """
    if hasattr(os, "sched_getaffinity"):
        try:
            return max(1, len(os.sched_getaffinity(0)))
        except OSError:
            pass
    return max(1, os.cpu_count() or 1)


def resolve_concurrency(requested: int | None) -> int:
    """
    Resolve the worker count for a run.

    Args:
        requested: Configured concurrency. None, zero or negative means
                   "use the host default".

    Returns:
        Worker count, always at least 1.
    """
    if requested is None or requested <= 0:
        return get_cpu_count()
    return requested
