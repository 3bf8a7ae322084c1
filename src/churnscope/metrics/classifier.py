"""Split tracked files into text and binary using git's eol attributes.

`git ls-files --eol` reports, per path, what git decided about line endings
in the index and in the working tree. A working-tree value of ``w/-text``
means git saw binary content, the same test it applies when diffing.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from ..git.runner import CommandRunner
from ..logging_config import get_logger

logger = get_logger(__name__)

BINARY_MARKER = "w/-text"
DEFAULT_BATCH_SIZE = 1000


def batched(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


def parse_eol_output(stdout: str) -> set[str]:
    """Return the text paths in NUL-terminated ``ls-files --eol -z`` output.

    Each record looks like ``i/lf    w/lf    attr/text eol=lf \\tpath``. The
    attribute column can itself contain spaces, so the part before the tab
    is split into at most three fields.
    """
    text_files: set[str] = set()
    for record in stdout.split("\0"):
        fields, sep, path = record.partition("\t")
        if not sep or not path:
            continue

        parts = fields.split(None, 2)
        worktree_eol = parts[1] if len(parts) > 1 else ""
        if worktree_eol != BINARY_MARKER:
            text_files.add(path)
    return text_files


def extract_text_files(
    runner: CommandRunner,
    targets: Iterable[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> frozenset[str]:
    """Classify ``targets`` and return the ones git considers text.

    ``--error-unmatch`` makes a batch fail when it names a path the index
    does not know, which raises GitCommandError out of this function.
    """
    targets = list(targets)
    text_files: set[str] = set()

    for batch in batched(targets, batch_size):
        stdout = runner.git(
            "--literal-pathspecs", "ls-files", "--eol", "--error-unmatch", "-z", "--", *batch
        )
        text_files |= parse_eol_output(stdout)

    logger.debug("%d of %d files classified as text", len(text_files), len(targets))
    return frozenset(text_files)
