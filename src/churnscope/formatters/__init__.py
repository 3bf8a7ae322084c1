"""Output formatters for churnscope."""

from .base import BaseFormatter
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .quiet_formatter import QuietFormatter
from .rich_formatter import RichFormatter

FORMATTERS = {
    "rich": RichFormatter,
    "json": JsonFormatter,
    "csv": CsvFormatter,
    "quiet": QuietFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "csv", "quiet"

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "QuietFormatter",
    "get_formatter",
]
