"""Find the latest commit time of every file in one pass over git log."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..exceptions import HistoryParseError
from ..git.runner import CommandRunner
from ..logging_config import get_logger

logger = get_logger(__name__)

COMMIT_SEPARATOR = "\0\0"


def parse_iso8601(value: str) -> datetime:
    """Parse a git ``%aI``/``%cI`` timestamp into an aware datetime."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise HistoryParseError(f"invalid timestamp {value!r}")
    if parsed.tzinfo is None:
        raise HistoryParseError(f"timestamp without offset {value!r}")
    return parsed


def parse_commit_record(record: str) -> tuple[str, list[str]]:
    """Split one ``\\0\\0``-separated chunk of ``git log -z`` into (date, paths).

    Sample output for five commits, two of them empty::

        2021-12-20T12:51:39+09:00\\nC\\0\\0
        2021-12-20T12:51:28+09:00\\02021-12-20T12:51:09+09:00\\nB\\0\\0
        2021-12-20T12:50:58+09:00\\nA\\0\\0
        2021-12-20T12:50:35+09:00

    A commit without file changes has no path list to close it, so its date
    runs into the next record joined by a single NUL. The last NUL-separated
    date before the newline is the one that owns the paths.
    """
    date_field, _, paths_field = record.partition("\n")
    date = date_field.split("\0")[-1].strip()
    if not date:
        raise HistoryParseError("commit date could not be determined", record)

    return date, [p for p in paths_field.split("\0") if p]


def later_timestamp(current: str, candidate: str) -> str:
    """Return the later of two ISO-8601 strings; ``""`` is earlier than anything.

    Comparison is by instant, not by string, because offsets differ between
    authors. Equal instants keep ``current``.
    """
    if current == "":
        return candidate
    if candidate == "":
        return current
    return candidate if parse_iso8601(current) < parse_iso8601(candidate) else current


def scan_last_committed_at(runner: CommandRunner, targets: Iterable[str]) -> dict[str, str]:
    """Map each target path to the author date of its newest commit.

    Every target starts at ``""`` so files never committed (or only present
    in the working tree) still get a value. Paths in history that are no
    longer in ``targets`` are ignored.
    """
    stdout = runner.git("log", "--format=format:%aI", "--name-only", "-z", "--no-renames")
    last_committed_at = build_last_committed_at(stdout, targets)

    touched = sum(1 for value in last_committed_at.values() if value)
    logger.debug("%d of %d files have a recorded commit", touched, len(last_committed_at))
    return last_committed_at


def build_last_committed_at(stdout: str, targets: Iterable[str]) -> dict[str, str]:
    """Fold captured ``git log -z --name-only`` output into a path -> date map."""
    last_committed_at = {path: "" for path in targets}
    if not stdout:
        return last_committed_at
    for record in stdout.split(COMMIT_SEPARATOR):
        date, paths = parse_commit_record(record)
        for path in paths:
            if path in last_committed_at:
                last_committed_at[path] = later_timestamp(last_committed_at[path], date)
    return last_committed_at
