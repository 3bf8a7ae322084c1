"""Base formatter interface for churnscope output rendering."""

from abc import ABC, abstractmethod

from ..metrics.models import MetricsResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: MetricsResult) -> None:
        """Write the result to stdout."""

    @abstractmethod
    def format(self, result: MetricsResult) -> str:
        """Return formatted string representation of the result."""


def display_path(path: str) -> str:
    """Make a path printable; undecodable bytes are shown as ``\\xNN``."""
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
