# ghopac Sync Worker
# Per-target clone/pull and the per-worker outcome fold

import functools
import operator
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ghopac.git.backend import GitBackend
from ghopac.sync.queue import WorkQueue
from ghopac.sync.target import SyncTarget

if TYPE_CHECKING:
    from ghopac.output.console import Console


def fold_outcomes(outcomes: Iterable[bool]) -> bool:
    """
    Reduce outcomes to one verdict with logical AND, seeded True.

    Consumes the whole iterable; a failure never stops the remaining
    items from being processed.
    """
    return functools.reduce(operator.and_, outcomes, True)


def sync_target(target: SyncTarget, git: GitBackend, console: "Console") -> bool:
    """
    Bring one target up to date.

    An existing directory is pulled, a missing one is cloned from the
    target's origin. Without either nothing is run and the target fails.

    Returns:
        True if the git operation succeeded.
    """
    if target.path.exists():
        if not target.path.is_dir():
            console.failed(target, "exists but is not a directory")
            return False
        action = "pull"
        result = git.pull(target.path)
    elif target.origin:
        action = "clone"
        result = git.clone(target.origin, target.path)
    else:
        console.warning(f"Unable to sync directory {target.path} as it does not exist and has no origin, skipping.")
        return False

    if result.success:
        console.ok(target, result.message or action)
        return True

    console.failed(target, result.message or f"{action} failed")
    return False


def _outcomes(work: WorkQueue, git: GitBackend, console: "Console") -> Iterable[bool]:
    for target in work:
        try:
            yield sync_target(target, git, console)
        except Exception as e:
            console.failed(target, f"unexpected error: {e}")
            yield False


def run_worker(work: WorkQueue, git: GitBackend, console: "Console") -> bool:
    """
    Drain the queue until it is closed and empty.

    Returns:
        True if every target this worker took succeeded (also when it
        took none).
    """
    return fold_outcomes(_outcomes(work, git, console))
