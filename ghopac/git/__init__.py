# ghopac Git Module
# Git operations and the backends sync workers call

from ghopac.git.backend import DryRunGit, GitBackend, SubprocessGit
from ghopac.git.operations import GitError, GitResult, clone_repo, pull

__all__ = [
    "GitError",
    "GitResult",
    "clone_repo",
    "pull",
    "GitBackend",
    "SubprocessGit",
    "DryRunGit",
]
