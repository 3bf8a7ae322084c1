"""Base exception for churnscope."""

from typing import Dict, Optional


class ChurnscopeError(Exception):
    """Base exception for all churnscope errors.

    ``details`` carries the facts a user needs to act on the error (the
    failing command's stderr, the offending path). ``str()`` appends them
    on a single line so they fit one log record.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={_one_line(v)}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"


def _one_line(value: str) -> str:
    # git writes multi-line stderr (hints, usage)
    return " | ".join(line.strip() for line in str(value).splitlines() if line.strip())
