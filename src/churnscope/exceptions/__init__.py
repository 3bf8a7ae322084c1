"""Exception hierarchy for churnscope."""

from .base import ChurnscopeError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .git import (
    EmptyHistoryError,
    GitCommandError,
    GitError,
    HistoryParseError,
    ToolNotFoundError,
)

__all__ = [
    "ChurnscopeError",
    "GitError",
    "GitCommandError",
    "ToolNotFoundError",
    "HistoryParseError",
    "EmptyHistoryError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
