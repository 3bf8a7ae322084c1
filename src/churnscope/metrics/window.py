"""Pick the commit range churn is measured over.

Churn is conventionally measured over the last 90 days before the newest
commit. A quiet project may only have a handful of commits in that period,
and churn values computed from so few commits are noisy when compared
across files. So a second window of the last 100 commits is computed as
well, and whichever of the two holds more commits is used.
"""

from __future__ import annotations

from datetime import timedelta

from ..exceptions import EmptyHistoryError, HistoryParseError
from ..git.runner import CommandRunner
from ..logging_config import get_logger
from .history import parse_iso8601
from .models import ChurnWindow

logger = get_logger(__name__)

CHURN_COMMIT_COUNT = 100
CHURN_PERIOD_IN_DAYS = 90

SUMMARY_FORMAT = "--format=format:%H|%cI"


def parse_summary_line(line: str) -> tuple[str, str]:
    """Split a ``<sha>|<committer date>`` line."""
    sha, _, timestamp = line.partition("|")
    sha = sha.strip()
    timestamp = timestamp.strip()
    if not sha:
        raise HistoryParseError("missing commit id in summary line", line)
    if not timestamp:
        raise HistoryParseError("missing commit time in summary line", line)
    return sha, timestamp


def parse_commit_summary(stdout: str, query: str = "") -> ChurnWindow:
    """Build a ChurnWindow from newest-first ``%H|%cI`` lines."""
    lines = [line for line in stdout.splitlines() if line.strip()]
    if not lines:
        raise EmptyHistoryError(query)

    latest_sha, latest_time = parse_summary_line(lines[0])
    oldest_sha, oldest_time = parse_summary_line(lines[-1])

    return ChurnWindow(
        count=len(lines),
        latest_commit_id=latest_sha,
        latest_timestamp=parse_iso8601(latest_time),
        oldest_commit_id=oldest_sha,
        oldest_timestamp=parse_iso8601(oldest_time),
    )


def commit_summary_within(runner: CommandRunner, *range_args: str) -> ChurnWindow:
    """Summarize the commits ``git log <range_args>`` selects."""
    stdout = runner.git("log", SUMMARY_FORMAT, *range_args)
    return parse_commit_summary(stdout, query=" ".join(range_args))


def choose_window(by_count: ChurnWindow, by_time: ChurnWindow) -> ChurnWindow:
    """Return the window holding more commits; a tie keeps ``by_count``."""
    return by_time if by_time.count > by_count.count else by_count


def select_churn_window(
    runner: CommandRunner,
    commit_count: int = CHURN_COMMIT_COUNT,
    period_days: int = CHURN_PERIOD_IN_DAYS,
) -> ChurnWindow:
    """Compute both candidate windows from HEAD and return the effective one."""
    by_count = commit_summary_within(runner, "--max-count", str(commit_count))

    since = by_count.latest_timestamp - timedelta(days=period_days)
    by_time = commit_summary_within(runner, "--since", since.isoformat())

    window = choose_window(by_count, by_time)
    logger.info(
        "Churn window: %d commits (last %d commits: %d, last %d days: %d)",
        window.count,
        commit_count,
        by_count.count,
        period_days,
        by_time.count,
    )
    return window
