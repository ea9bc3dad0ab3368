# ghopac Test Fixtures
# Pytest fixtures for ghopac tests

import io
import tempfile
import threading
from collections.abc import Generator
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pytest
import yaml

from ghopac.git.operations import GitResult
from ghopac.output.console import Console


class FakeGit:
    """GitBackend test double that records every call."""

    def __init__(self, fail: Optional[set[Path]] = None, create_on_clone: bool = False):
        self.fail = fail or set()
        self.create_on_clone = create_on_clone
        self.clones: list[tuple[str, Path]] = []
        self.pulls: list[Path] = []
        self._lock = threading.Lock()

    @property
    def calls(self) -> int:
        return len(self.clones) + len(self.pulls)

    def clone(self, origin: str, destination: Path) -> GitResult:
        with self._lock:
            self.clones.append((origin, destination))
        if destination in self.fail:
            return GitResult(False, "fatal: repository not found")
        if self.create_on_clone:
            destination.mkdir(parents=True)
        return GitResult(True)

    def pull(self, path: Path) -> GitResult:
        with self._lock:
            self.pulls.append(path)
        if path in self.fail:
            return GitResult(False, "fatal: could not read from remote repository")
        return GitResult(True)


def make_response(repos: list[dict], next_page: Optional[int] = None) -> MagicMock:
    """Build a fake requests.Response for one listing page."""
    response = MagicMock()
    response.json.return_value = repos
    response.links = {}
    if next_page is not None:
        response.links = {
            "next": {"url": f"https://api.github.com/organizations/1/repos?per_page=25&page={next_page}", "rel": "next"}
        }
    return response


def make_repos(prefix: str, count: int) -> list[dict]:
    return [
        {
            "name": f"{prefix}{i}",
            "ssh_url": f"git@github.com:acme/{prefix}{i}.git",
            "clone_url": f"https://github.com/acme/{prefix}{i}.git",
        }
        for i in range(count)
    ]


def make_session(*responses: MagicMock) -> MagicMock:
    session = MagicMock()
    session.headers = {}
    session.get.side_effect = list(responses)
    return session


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory with a clean XDG environment."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(temp_dir / "etc-xdg"))
    monkeypatch.delenv("GHOPAC_CONFIG", raising=False)
    return home


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(log_stream: io.StringIO) -> Console:
    """Verbose, uncolored console writing into log_stream."""
    return Console(verbose=True, colored=False, file=log_stream)


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def mirror(temp_dir: Path) -> Path:
    """Base directory for an org mirror."""
    base = temp_dir / "src" / "acme"
    base.mkdir(parents=True)
    return base


@pytest.fixture
def sample_config(temp_dir: Path, mirror: Path) -> dict:
    """Create sample configuration dict."""
    syncpoint = temp_dir / "dotfiles"
    syncpoint.mkdir()
    return {
        "github_access_token": "ghp_test",
        "orgs": [{"org": "acme", "path": str(mirror)}],
        "syncpoints": [str(syncpoint)],
        "concurrency": 2,
        "verbose": False,
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file in the XDG location."""
    config_dir = temp_home / ".config" / "ghopac"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path
