"""
Logging configuration for churnscope.

Console output goes through rich on stderr so it never mixes with a report
written to stdout. A log file, when requested, always records at DEBUG level:
that is where the full trace of git and wc invocations ends up.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``churnscope`` logger tree.

    Args:
        verbosity: "quiet", "normal" or "verbose" (see MetricsConfig)
        log_file: Optional file path; receives every record down to DEBUG

    Returns:
        The root churnscope logger
    """
    console_level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    console_handler.setLevel(console_level)
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8", errors="backslashreplace")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger("churnscope")
    logger.setLevel(logging.DEBUG if log_file else console_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``churnscope`` namespace.

    Args:
        name: Module name (e.g., 'churnscope.metrics.churn' or 'metrics.churn').
              If None, returns the root churnscope logger
    """
    if name is None:
        return logging.getLogger("churnscope")

    if not name.startswith("churnscope"):
        name = f"churnscope.{name}"

    return logging.getLogger(name)
