"""Sum numstat additions and deletions per path over the churn window."""

from __future__ import annotations

from ..exceptions import HistoryParseError
from ..git.runner import CommandRunner
from ..logging_config import get_logger
from .models import ChurnRecord, ChurnWindow

logger = get_logger(__name__)

COMMIT_SENTINEL = "#"
BINARY_COUNT = "-"


def _count(value: str, line: str) -> int:
    if value == BINARY_COUNT:
        return 0
    try:
        count = int(value)
    except ValueError:
        raise HistoryParseError(f"non-numeric numstat count {value!r}", line)
    if count < 0:
        raise HistoryParseError(f"negative numstat count {value!r}", line)
    return count


def parse_numstat(stdout: str) -> tuple[dict[str, ChurnRecord], int]:
    """Fold ``git log --format=format:# --numstat -z`` output into churn records.

    Entries are NUL-terminated ``adds\\tdels\\tpath`` so paths come through
    unquoted, tabs and newlines included. Each commit starts with the
    ``#`` sentinel, joined to its first entry by a newline and to the
    previous commit by a NUL::

        #\\n10\\t0\\tsrc/app.py\\0 3\\t0\\tREADME.md\\0 \\0 #\\0 #\\n-\\t-\\tlogo.png\\0

    Returns ``(records, number_of_commits)`` where the commit count is the
    number of sentinels seen. Merge commits print a sentinel but no
    entries, so this can differ from a plain ``git log`` count.
    Entries missing a field are skipped.
    """
    records: dict[str, ChurnRecord] = {}
    number_of_commits = 0

    for entry in stdout.split("\0"):
        # numstat entries start with a digit or "-", never "#" or a newline
        entry = entry.lstrip("\n")
        if entry.startswith(COMMIT_SENTINEL):
            number_of_commits += 1
            entry = entry[len(COMMIT_SENTINEL) :].lstrip("\n")

        fields = entry.split("\t", 2)
        if len(fields) < 3 or not all(fields):
            continue

        adds, dels, path = fields
        current = records.get(path, ChurnRecord.zero())
        records[path] = current.add(_count(adds, entry), _count(dels, entry))

    return records, number_of_commits


def aggregate_churn(
    runner: CommandRunner, window: ChurnWindow
) -> tuple[dict[str, ChurnRecord], int]:
    """Collect churn for commits after ``window.oldest_commit_id`` up to HEAD.

    The range is half-open: the oldest commit of the window is the base the
    diffs are measured from and is not itself counted. Paths that no longer
    exist are kept; the caller filters to the current inventory.
    """
    stdout = runner.git(
        "log",
        "--reverse",
        f"--format=format:{COMMIT_SENTINEL}",
        "--numstat",
        "-z",
        "--no-renames",
        f"{window.oldest_commit_id}..HEAD",
    )
    records, number_of_commits = parse_numstat(stdout)
    logger.debug("Churn over %d commits touching %d paths", number_of_commits, len(records))
    return records, number_of_commits
