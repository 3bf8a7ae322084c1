"""Public API for churnscope.

Example:
    >>> from churnscope import analyze
    >>> result = analyze("/path/to/repo")
    >>> for record in result.records:
    ...     print(record.path, record.lines_of_code, record.last_committed_at)

    >>> result = analyze("/path/to/repo", churn_commit_count=200)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import load_config
from .exceptions import InvalidPathError
from .git.runner import repository_root
from .logging_config import get_logger
from .metrics import FileInfoAnalyzer, MetricsResult
from .metrics.assembler import ProgressCallback

logger = get_logger(__name__)


def resolve_root(path: str | Path) -> Path:
    """Resolve ``path`` and check it is the top level of a git work tree.

    Paths reported by git are relative to the top level, so analyzing a
    subdirectory would mismatch every lookup.
    """
    root = Path(path).resolve()
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")
    toplevel = repository_root(root)
    if toplevel is None:
        raise InvalidPathError(root, "not inside a git working tree")
    if toplevel != root:
        raise InvalidPathError(root, f"not the repository root (root is {toplevel})")
    return root


def analyze(
    path: str | Path = ".",
    config_file: Optional[Path] = None,
    on_progress: Optional[ProgressCallback] = None,
    **overrides,
) -> MetricsResult:
    """Compute per-file metrics for the git working tree at ``path``.

    Args:
        path: Repository root (default: current directory)
        config_file: Optional explicit config file path
        on_progress: Called with a message as each phase starts
        **overrides: Configuration overrides (e.g., churn_commit_count=200)

    Returns:
        MetricsResult with one record per file in the working tree

    Raises:
        InvalidPathError: If ``path`` is not the root of a git work tree
        ChurnscopeError: If configuration is invalid or a git query fails
    """
    root = resolve_root(path)
    config = load_config(config_file=config_file, **overrides)
    logger.debug("Analyzing %s with %s", root, config)

    analyzer = FileInfoAnalyzer(root, config=config, on_progress=on_progress)
    return analyzer.run()
