# ghopac GitHub Client
# Paged organization repository listing over the GitHub REST API

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qs, urlparse

import requests

from ghopac import __version__
from ghopac.config.schema import DEFAULT_API_URL, CloneProtocol

DEFAULT_PAGE_SIZE = 25
REQUEST_TIMEOUT = 30


class GitHubError(Exception):
    """Exception raised when a repository listing page can't be fetched."""

    def __init__(self, message: str, status_code: Optional[int] = None, page: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        self.page = page
        super().__init__(message)


@dataclass(frozen=True)
class Repository:
    """The parts of a listed repository needed to sync it."""

    name: str
    ssh_url: str = ""
    clone_url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            name=data["name"],
            ssh_url=data.get("ssh_url") or "",
            clone_url=data.get("clone_url") or "",
        )

    def origin(self, protocol: CloneProtocol = CloneProtocol.SSH) -> Optional[str]:
        """Get the clone URL for protocol, or None if the API gave none."""
        url = self.ssh_url if protocol == CloneProtocol.SSH else self.clone_url
        url = url.strip()
        return url or None


@dataclass(frozen=True)
class RepositoryPage:
    """One page of an organization listing."""

    number: int
    repositories: list[Repository]
    next_page: Optional[int] = None

    @property
    def is_last(self) -> bool:
        return self.next_page is None


def _next_page_number(response: requests.Response) -> Optional[int]:
    """Extract the page cursor from the `next` Link relation, if any."""
    link = response.links.get("next")
    if not link or "url" not in link:
        return None
    values = parse_qs(urlparse(link["url"]).query).get("page")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


class GitHubClient:
    """
    Minimal GitHub REST client.

    Only lists organization repositories, one page per request.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        api_url: str = DEFAULT_API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize client.

        Args:
            token: Access token sent as a bearer token. Anonymous if empty.
            api_url: Base URL of the REST API.
            session: Optional requests session to reuse.
            timeout: Per-request timeout in seconds.
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": f"ghopac/{__version__}",
            }
        )
        if token and token.strip():
            self.session.headers["Authorization"] = f"Bearer {token.strip()}"

    def list_org_repos(self, org: str, page: int = 1, per_page: int = DEFAULT_PAGE_SIZE) -> RepositoryPage:
        """
        Fetch a single page of an organization's repositories.

        Args:
            org: Organization login.
            page: 1-based page cursor.
            per_page: Page size.

        Returns:
            RepositoryPage with the cursor of the following page, if any.

        Raises:
            GitHubError: On transport errors, non-2xx responses or bad payloads.
        """
        url = f"{self.api_url}/orgs/{org}/repos"
        try:
            response = self.session.get(url, params={"page": page, "per_page": per_page}, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise GitHubError(str(e), status_code=status, page=page) from e
        except requests.RequestException as e:
            raise GitHubError(str(e), page=page) from e
        except ValueError as e:
            raise GitHubError(f"Invalid JSON in response from {url}: {e}", page=page) from e

        if not isinstance(payload, list):
            raise GitHubError(f"Unexpected response from {url}: expected a list", page=page)

        try:
            repositories = [Repository.from_api(item) for item in payload]
        except (KeyError, TypeError) as e:
            raise GitHubError(f"Malformed repository entry from {url}: {e}", page=page) from e

        return RepositoryPage(number=page, repositories=repositories, next_page=_next_page_number(response))

    def iter_org_pages(self, org: str, per_page: int = DEFAULT_PAGE_SIZE) -> Iterator[RepositoryPage]:
        """
        Lazily page through an organization's repositories.

        Finite and not restartable. Stops after the page without a `next`
        link; an empty page alone does not end iteration. A failing page
        raises GitHubError and ends iteration.
        """
        page: Optional[int] = 1
        while page is not None:
            result = self.list_org_repos(org, page=page, per_page=per_page)
            yield result
            page = result.next_page
