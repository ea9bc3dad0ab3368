# Tests for ghopac.git
# Git command execution and backends

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from ghopac.git.backend import DryRunGit, SubprocessGit
from ghopac.git.operations import GitError, GitResult, _run_git, clone_repo, pull


class TestGitError:
    """Tests for GitError exception."""

    def test_basic_error(self):
        err = GitError("test message")
        assert err.message == "test message"
        assert err.returncode == 1
        assert err.stderr == ""
        assert str(err) == "test message"

    def test_describe_includes_output(self):
        err = GitError("failed", returncode=128, stderr="fatal: not a repo", stdout="partial")
        text = err.describe()
        assert "status 128" in text
        assert "----> stdout [partial]" in text
        assert "----> stderr [fatal: not a repo]" in text


class TestRunGit:
    """Tests for _run_git helper."""

    @patch("ghopac.git.operations.subprocess.run")
    def test_successful_command(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git", "status"], returncode=0, stdout="clean", stderr=""
        )
        result = _run_git("status")
        assert result.returncode == 0
        assert result.stdout == "clean"

    @patch("ghopac.git.operations.subprocess.run")
    def test_failed_command_raises(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git", "bad"], returncode=1, stdout="", stderr="error\n"
        )
        with pytest.raises(GitError) as exc_info:
            _run_git("bad")
        assert exc_info.value.returncode == 1
        assert exc_info.value.stderr == "error"

    @patch("ghopac.git.operations.subprocess.run")
    def test_killed_by_signal(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=["git", "pull"], returncode=-9, stdout="", stderr="")
        with pytest.raises(GitError, match="signal 9"):
            _run_git("pull")

    @patch("ghopac.git.operations.subprocess.run", side_effect=FileNotFoundError)
    def test_git_not_found(self, mock_run):
        with pytest.raises(GitError, match="git command not found"):
            _run_git("status")

    @patch("ghopac.git.operations.subprocess.run")
    def test_stdin_closed_and_cwd_passed(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=["git", "status"], returncode=0, stdout="", stderr="")
        _run_git("status", cwd=Path("/tmp"))
        mock_run.assert_called_once_with(
            ["git", "status"],
            cwd=Path("/tmp"),
            check=False,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
        )


class TestCloneRepo:
    """Tests for clone_repo."""

    @patch("ghopac.git.operations._run_git")
    def test_clone_args_and_cwd(self, mock_git, temp_dir: Path):
        dest = temp_dir / "missing" / "repo"
        result = clone_repo("git@github.com:acme/repo.git", dest)
        assert result == GitResult(True)
        mock_git.assert_called_once_with("clone", "git@github.com:acme/repo.git", str(dest), cwd=temp_dir)

    @patch("ghopac.git.operations._run_git")
    def test_relative_dest_made_absolute(self, mock_git, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(temp_dir)
        (temp_dir / "src" / "acme").mkdir(parents=True)
        clone_repo("git@github.com:acme/widgets.git", Path("src/acme/widgets"))
        mock_git.assert_called_once_with(
            "clone",
            "git@github.com:acme/widgets.git",
            str(temp_dir / "src" / "acme" / "widgets"),
            cwd=temp_dir / "src" / "acme",
        )

    @patch("ghopac.git.operations._run_git", side_effect=GitError("Git command failed", 128, "denied"))
    def test_clone_failure(self, mock_git, temp_dir: Path):
        result = clone_repo("git@github.com:acme/repo.git", temp_dir / "repo")
        assert result.success is False
        assert "denied" in result.message


class TestPull:
    """Tests for pull."""

    @patch("ghopac.git.operations._run_git")
    def test_pull_prunes(self, mock_git, temp_dir: Path):
        assert pull(temp_dir).success is True
        mock_git.assert_called_once_with("pull", "--prune", cwd=temp_dir)

    @patch("ghopac.git.operations._run_git")
    def test_pull_without_prune(self, mock_git, temp_dir: Path):
        pull(temp_dir, prune=False)
        mock_git.assert_called_once_with("pull", cwd=temp_dir)

    @patch("ghopac.git.operations._run_git", side_effect=GitError("Git command failed", 1, "conflict"))
    def test_pull_failure(self, mock_git, temp_dir: Path):
        result = pull(temp_dir)
        assert result.success is False
        assert "conflict" in result.message


class TestBackends:
    """Tests for GitBackend implementations."""

    @patch("ghopac.git.backend.operations.pull", return_value=GitResult(True))
    def test_subprocess_pull_prunes(self, mock_pull, temp_dir: Path):
        SubprocessGit().pull(temp_dir)
        mock_pull.assert_called_once_with(temp_dir, prune=True)

    @patch("ghopac.git.backend.operations.clone_repo", return_value=GitResult(True))
    def test_subprocess_clone(self, mock_clone, temp_dir: Path):
        SubprocessGit().clone("https://github.com/acme/a.git", temp_dir / "a")
        mock_clone.assert_called_once_with("https://github.com/acme/a.git", temp_dir / "a")

    @patch("ghopac.git.operations.subprocess.run")
    def test_dry_run_never_runs_git(self, mock_run, temp_dir: Path):
        git = DryRunGit()
        assert git.pull(temp_dir).success is True
        result = git.clone("git@github.com:acme/a.git", temp_dir / "a")
        assert "would clone" in result.message
        mock_run.assert_not_called()
        assert not (temp_dir / "a").exists()
