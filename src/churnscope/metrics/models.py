"""Data models for per-file history metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ChurnWindow:
    """A contiguous run of commits ending at the newest commit."""

    count: int
    latest_commit_id: str
    latest_timestamp: datetime
    oldest_commit_id: str
    oldest_timestamp: datetime


@dataclass(frozen=True)
class ChurnRecord:
    occurrence: int = 0  # commits touching the path inside the window
    additions: int = 0
    deletions: int = 0

    @classmethod
    def zero(cls) -> "ChurnRecord":
        return cls()

    def add(self, additions: int, deletions: int) -> "ChurnRecord":
        """Return a copy with one more commit's numstat folded in."""
        return ChurnRecord(
            occurrence=self.occurrence + 1,
            additions=self.additions + additions,
            deletions=self.deletions + deletions,
        )


@dataclass(frozen=True)
class MetricRecord:
    """Per-file output row."""

    path: str
    lines_of_code: Optional[int]  # None = no info (binary or uncounted)
    last_committed_at: str  # ISO-8601, "" when never committed
    number_of_commits: int  # run-wide, same on every record
    occurrence: int
    additions: int
    deletions: int

    @property
    def message(self) -> str:
        loc = self.lines_of_code if self.lines_of_code is not None else "(no info)"
        return f"{self.path}: loc = {loc}, last commit datetime = {self.last_committed_at}"

    def to_dict(self) -> dict:
        return {
            "lines_of_code": self.lines_of_code,
            "last_committed_at": self.last_committed_at,
            "number_of_commits": self.number_of_commits,
            "occurrence": self.occurrence,
            "additions": self.additions,
            "deletions": self.deletions,
        }


ISSUE_ID = "metrics_fileinfo"


@dataclass(frozen=True)
class MetricsResult:
    """Everything one run produced."""

    root: Path
    records: tuple[MetricRecord, ...]
    window: Optional[ChurnWindow] = None  # None when the repository has no commits
    number_of_commits: int = 0
    durations: dict[str, float] = field(default_factory=dict, compare=False)

    def __len__(self) -> int:
        return len(self.records)

    def by_path(self) -> dict[str, MetricRecord]:
        return {r.path: r for r in self.records}

    def issues(self) -> list[dict]:
        """Records in the generic per-file finding shape."""
        return [
            {
                "id": ISSUE_ID,
                "path": r.path,
                "location": None,
                "message": r.message,
                "object": r.to_dict(),
            }
            for r in self.records
        ]
