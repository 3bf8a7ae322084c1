"""
churnscope - per-file history metrics for git repositories.

For every file in a working tree: lines of code, time of the last commit
touching it, and churn (commits, added and deleted lines) over an adaptive
window of recent history.
"""

__version__ = "0.1.0"

from .api import analyze
from .metrics import ChurnRecord, ChurnWindow, FileInfoAnalyzer, MetricRecord, MetricsResult

__all__ = [
    "analyze",
    "FileInfoAnalyzer",
    "MetricsResult",
    "MetricRecord",
    "ChurnRecord",
    "ChurnWindow",
]
