"""Shared test fixtures for churnscope."""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Optional, Union

import pytest

GIT = shutil.which("git")


class FakeRunner:
    """Stands in for CommandRunner; answers from canned output functions."""

    def __init__(
        self,
        git: Optional[Callable[[tuple], str]] = None,
        capture: Optional[Callable[[tuple], str]] = None,
    ):
        self._git = git or (lambda args: "")
        self._capture = capture or (lambda args: "")
        self.git_calls: list[tuple] = []
        self.capture_calls: list[tuple] = []

    def git(self, *args: str) -> str:
        self.git_calls.append(args)
        return self._git(args)

    def capture(self, *command: str) -> str:
        self.capture_calls.append(command)
        return self._capture(command)


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


class GitRepo:
    """Throwaway repository with commits at fixed dates."""

    def __init__(self, path: Path):
        self.path = path
        self.git("init", "--quiet")
        self.git("config", "user.email", "dev@example.com")
        self.git("config", "user.name", "Dev")
        self.git("config", "commit.gpgsign", "false")
        self.git("config", "core.autocrlf", "false")

    def git(self, *args: str, env: Optional[dict] = None) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=str(self.path),
            capture_output=True,
            text=True,
            env={**os.environ, **(env or {})},
            check=True,
        )
        return result.stdout.strip()

    def write(self, relpath: str, content: Union[str, bytes]) -> Path:
        target = self.path / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
        return target

    def remove(self, relpath: str) -> None:
        self.git("rm", "--quiet", relpath)

    def commit(self, message: str, date: str, allow_empty: bool = False) -> str:
        """Commit everything in the tree with author and committer ``date``."""
        self.git("add", "--all")
        args = ["commit", "--quiet", "-m", message]
        if allow_empty:
            args.append("--allow-empty")
        self.git(*args, env={"GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date})
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path):
    """An empty git repository under tmp_path."""
    if GIT is None:
        pytest.skip("git not found")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    return GitRepo(repo_dir)
