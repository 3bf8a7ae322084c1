"""CSV formatter for churnscope."""

import csv
import io

from ..metrics.models import MetricsResult
from .base import BaseFormatter, display_path

COLUMNS = [
    "path",
    "lines_of_code",
    "last_committed_at",
    "number_of_commits",
    "occurrence",
    "additions",
    "deletions",
]


class CsvFormatter(BaseFormatter):
    """Render records as CSV, one row per file."""

    def render(self, result: MetricsResult) -> None:
        print(self.format(result), end="")

    def format(self, result: MetricsResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(COLUMNS)
        for r in result.records:
            writer.writerow([
                display_path(r.path),
                "" if r.lines_of_code is None else r.lines_of_code,
                r.last_committed_at,
                r.number_of_commits,
                r.occurrence,
                r.additions,
                r.deletions,
            ])
        return output.getvalue()
