# ghopac Git Operations
# Git command execution for clone and pull

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ghopac.utils.paths import closest_existing_dir


class GitError(Exception):
    """Exception raised for git operation errors."""

    def __init__(self, message: str, returncode: int = 1, stderr: str = "", stdout: str = ""):
        self.message = message
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout
        super().__init__(message)

    def describe(self) -> str:
        """Render the error with whatever output git produced."""
        parts = [f"{self.message} (status {self.returncode})"]
        if self.stdout:
            parts.append(f"----> stdout [{self.stdout}]")
        if self.stderr:
            parts.append(f"----> stderr [{self.stderr}]")
        return "\n".join(parts)


@dataclass(frozen=True)
class GitResult:
    """Outcome of a single clone or pull."""

    success: bool
    message: str = ""


def _run_git(
    *args: str,
    cwd: Optional[Path] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command with stdin closed and output captured.

    Args:
        *args: Git command arguments.
        cwd: Working directory.

    Returns:
        CompletedProcess with result.

    Raises:
        GitError: If git is missing or exits non-zero.
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise GitError("git command not found. Is git installed?")
    except OSError as e:
        raise GitError(f"Unable to run {' '.join(cmd)}: {e}")

    if result.returncode != 0:
        if result.returncode < 0:
            message = f"Git command killed by signal {-result.returncode}: {' '.join(cmd)}"
        else:
            message = f"Git command failed: {' '.join(cmd)}"
        raise GitError(
            message,
            returncode=result.returncode,
            stderr=result.stderr.strip() if result.stderr else "",
            stdout=result.stdout.strip() if result.stdout else "",
        )
    return result


def clone_repo(url: str, dest: Path) -> GitResult:
    """
    Clone a repository into dest.

    dest is made absolute before git runs from its closest existing
    ancestor, so the clone lands exactly at dest.

    Args:
        url: Repository URL.
        dest: Destination directory (must not exist yet).

    Returns:
        GitResult with git's diagnostics on failure.
    """
    dest = dest.absolute()
    try:
        _run_git("clone", url, str(dest), cwd=closest_existing_dir(dest.parent))
        return GitResult(True)
    except GitError as e:
        return GitResult(False, e.describe())


def pull(path: Path, *, prune: bool = True) -> GitResult:
    """
    Pull changes from the configured remote.

    Args:
        path: Repository path.
        prune: Drop remote-tracking branches deleted upstream.

    Returns:
        GitResult with git's diagnostics on failure.
    """
    args = ["pull"]
    if prune:
        args.append("--prune")

    try:
        _run_git(*args, cwd=path)
        return GitResult(True)
    except GitError as e:
        return GitResult(False, e.describe())
