# ghopac GitHub Module
# Remote repository listing

from ghopac.github.client import (
    DEFAULT_PAGE_SIZE,
    GitHubClient,
    GitHubError,
    Repository,
    RepositoryPage,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "GitHubClient",
    "GitHubError",
    "Repository",
    "RepositoryPage",
]
