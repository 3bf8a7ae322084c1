"""Quiet formatter: a single summary line."""

from ..metrics.models import MetricsResult
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    def render(self, result: MetricsResult) -> None:
        print(self.format(result))

    def format(self, result: MetricsResult) -> str:
        counted = sum(1 for r in result.records if r.lines_of_code is not None)
        touched = sum(1 for r in result.records if r.occurrence)
        return (
            f"{len(result.records)} files, {counted} with line counts, "
            f"{touched} changed in the last {result.number_of_commits} commits"
        )
