"""Run git and coreutils commands against a working tree."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import GitCommandError, ToolNotFoundError
from ..logging_config import get_logger

logger = get_logger(__name__)


class CommandRunner:
    """Execute external commands from the repository root and return stdout.

    Every call blocks until the process exits; no timeout is applied.
    Output is decoded as UTF-8 with ``surrogateescape`` so paths that are
    not valid UTF-8 survive the round trip.
    """

    def __init__(self, repo_path: str | Path, git_executable: str = "git"):
        self.repo_path = Path(repo_path).resolve()
        self.git_executable = git_executable

    def git(self, *args: str) -> str:
        """Run ``git <args>`` with path quoting disabled."""
        return self.capture(self.git_executable, "-c", "core.quotePath=false", *args)

    def capture(self, *command: str) -> str:
        """Run ``command`` and return stdout, raising on a non-zero exit."""
        logger.debug("Running %s", _describe(command))
        try:
            result = subprocess.run(
                list(command),
                cwd=str(self.repo_path),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
            )
        except FileNotFoundError:
            raise ToolNotFoundError(command[0])

        if result.returncode != 0:
            logger.debug("%s exited with %d", command[0], result.returncode)
            raise GitCommandError(command, result.returncode, result.stderr)
        return result.stdout


def repository_root(path: str | Path) -> Optional[Path]:
    """Top-level directory of the work tree containing ``path``, or None."""
    try:
        result = subprocess.run(
            ["git", "-C", str(path), "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        return None
    if result.returncode != 0 or not result.stdout.strip():
        return None
    return Path(result.stdout.strip()).resolve()


def _describe(command: Sequence[str], limit: int = 8) -> str:
    # Batched commands carry up to a thousand paths; keep the log line short.
    if len(command) <= limit:
        return " ".join(command)
    return f"{' '.join(command[:limit])} ... (+{len(command) - limit} args)"
