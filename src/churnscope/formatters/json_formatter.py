"""JSON formatter for churnscope."""

import json

from ..metrics.models import MetricsResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the per-file findings as a JSON document."""

    def render(self, result: MetricsResult) -> None:
        print(self.format(result))

    def format(self, result: MetricsResult) -> str:
        window = result.window
        data = {
            "root": str(result.root),
            "number_of_commits": result.number_of_commits,
            "window": None
            if window is None
            else {
                "count": window.count,
                "latest_commit_id": window.latest_commit_id,
                "latest_timestamp": window.latest_timestamp.isoformat(),
                "oldest_commit_id": window.oldest_commit_id,
                "oldest_timestamp": window.oldest_timestamp.isoformat(),
            },
            "issues": result.issues(),
        }
        return json.dumps(data, indent=2)
