"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import MetricsConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    commit_count: Optional[int] = None,
    period_days: Optional[int] = None,
    batch_size: Optional[int] = None,
    no_commit_graph: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> MetricsConfig:
    """Build configuration from CLI options."""
    overrides = {
        "churn_commit_count": commit_count,
        "churn_period_days": period_days,
        "batch_size": batch_size,
    }
    if no_commit_graph:
        overrides["write_commit_graph"] = False
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
