"""Tests for git/runner.py - external command execution."""

import pytest

from churnscope.exceptions import GitCommandError, ToolNotFoundError
from churnscope.git.runner import CommandRunner, _describe, repository_root


class TestCapture:
    """Test CommandRunner.capture against real executables."""

    def test_returns_stdout(self, tmp_path):
        runner = CommandRunner(tmp_path)
        assert runner.capture("echo", "hello") == "hello\n"

    def test_runs_in_repo_path(self, tmp_path):
        (tmp_path / "marker.txt").write_text("x")
        runner = CommandRunner(tmp_path)
        assert "marker.txt" in runner.capture("ls")

    def test_nonzero_exit_raises(self, tmp_path):
        runner = CommandRunner(tmp_path)
        with pytest.raises(GitCommandError) as exc_info:
            runner.capture("ls", "does-not-exist")
        assert exc_info.value.returncode != 0
        assert exc_info.value.command == ["ls", "does-not-exist"]

    def test_missing_executable_raises(self, tmp_path):
        runner = CommandRunner(tmp_path)
        with pytest.raises(ToolNotFoundError) as exc_info:
            runner.capture("churnscope-no-such-tool")
        assert exc_info.value.executable == "churnscope-no-such-tool"

    def test_missing_git_executable(self, tmp_path):
        runner = CommandRunner(tmp_path, git_executable="churnscope-no-such-git")
        with pytest.raises(ToolNotFoundError):
            runner.git("status")


class TestGit:
    def test_disables_path_quoting(self, git_repo):
        git_repo.write("日本語.txt", "x\n")
        git_repo.commit("unicode", "2024-01-01T00:00:00+00:00")

        runner = CommandRunner(git_repo.path)
        assert runner.git("ls-files").strip() == "日本語.txt"

    def test_failed_git_command_carries_stderr(self, git_repo):
        runner = CommandRunner(git_repo.path)
        with pytest.raises(GitCommandError) as exc_info:
            runner.git("rev-parse", "--verify", "no-such-ref")
        assert exc_info.value.command[:3] == ["git", "-c", "core.quotePath=false"]
        assert exc_info.value.stderr


class TestRepositoryRoot:
    def test_root_of_repository(self, git_repo):
        assert repository_root(git_repo.path) == git_repo.path.resolve()

    def test_subdirectory_reports_top_level(self, git_repo):
        sub = git_repo.path / "pkg"
        sub.mkdir()
        assert repository_root(sub) == git_repo.path.resolve()

    def test_outside_repository(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
        assert repository_root(tmp_path) is None


def test_describe_truncates_long_commands():
    command = ["wc", "-l", "--"] + [f"f{i}" for i in range(1000)]
    described = _describe(command)
    assert described.startswith("wc -l --")
    assert "(+995 args)" in described
