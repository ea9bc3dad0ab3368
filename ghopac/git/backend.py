# ghopac Git Backends
# Clone/pull capability used by sync workers

from pathlib import Path
from typing import Protocol

from ghopac.git import operations
from ghopac.git.operations import GitResult


class GitBackend(Protocol):
    """The two version control operations a worker may perform."""

    def clone(self, origin: str, destination: Path) -> GitResult: ...

    def pull(self, path: Path) -> GitResult: ...


class SubprocessGit:
    """Runs the real git executable."""

    def clone(self, origin: str, destination: Path) -> GitResult:
        return operations.clone_repo(origin, destination)

    def pull(self, path: Path) -> GitResult:
        return operations.pull(path, prune=True)


class DryRunGit:
    """Reports what would happen without invoking git."""

    def clone(self, origin: str, destination: Path) -> GitResult:
        return GitResult(True, f"would clone {origin} into {destination}")

    def pull(self, path: Path) -> GitResult:
        return GitResult(True, f"would pull {path}")
