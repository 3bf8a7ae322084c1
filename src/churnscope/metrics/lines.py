"""Count lines of text files with wc."""

from __future__ import annotations

import re
from typing import Iterable

from ..exceptions import HistoryParseError
from ..git.runner import CommandRunner
from ..logging_config import get_logger
from .classifier import DEFAULT_BATCH_SIZE, batched

logger = get_logger(__name__)

_TOTAL_LINE = re.compile(r"^\s*\d+ total$")


def parse_wc_output(stdout: str, input_count: int) -> dict[str, int]:
    """Parse ``wc -l`` output for ``input_count`` files.

    wc appends ``<N> total`` only when it was given more than one file, so the
    trailing line is dropped only in that case; a single file that happens to
    be called ``total`` is kept.
    """
    lines = [line for line in stdout.split("\n") if line.strip()]
    if input_count > 1 and lines and _TOTAL_LINE.match(lines[-1]):
        lines.pop()

    counts: dict[str, int] = {}
    for line in lines:
        fields = line.lstrip().split(None, 1)
        if len(fields) < 2:
            raise HistoryParseError("unexpected wc output line", line)
        loc, path = fields
        try:
            counts[path] = int(loc)
        except ValueError:
            raise HistoryParseError(f"non-numeric line count {loc!r}", line)
    return counts


def count_lines(
    runner: CommandRunner,
    text_files: Iterable[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> dict[str, int]:
    """Return ``{path: line count}`` for ``text_files``, batch by batch."""
    files = sorted(text_files)
    lines_of_code: dict[str, int] = {}

    for batch in batched(files, batch_size):
        stdout = runner.capture("wc", "-l", "--", *batch)
        lines_of_code.update(parse_wc_output(stdout, len(batch)))

    logger.debug("Counted lines for %d files", len(lines_of_code))
    return lines_of_code
