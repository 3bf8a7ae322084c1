"""Git and external tool exceptions: failed commands, unparsable history."""

from typing import Optional, Sequence

from .base import ChurnscopeError


class GitError(ChurnscopeError):
    """Base class for errors raised while querying the repository."""

    pass


class GitCommandError(GitError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        details = {"returncode": str(returncode)}
        if stderr.strip():
            details["stderr"] = stderr.strip()
        super().__init__(f"Command failed: {' '.join(command[:4])}", details=details)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class ToolNotFoundError(GitError):
    """Raised when the executable for a command is not on PATH."""

    def __init__(self, executable: str):
        super().__init__(f"Executable not found: {executable}", details={"executable": executable})
        self.executable = executable


class HistoryParseError(GitError):
    """Raised when command output cannot be turned into commit facts."""

    def __init__(self, reason: str, record: Optional[str] = None):
        details = {"reason": reason}
        if record is not None:
            details["record"] = repr(record[:80])
        super().__init__(f"Cannot parse git output: {reason}", details=details)
        self.reason = reason
        self.record = record


class EmptyHistoryError(GitError):
    """Raised when a commit summary query returns no commits."""

    def __init__(self, query: str):
        super().__init__(
            "Commit summary returned no commits", details={"query": query}
        )
        self.query = query
