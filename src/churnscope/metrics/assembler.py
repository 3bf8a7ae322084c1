"""Drive the metric components and join their results per file."""

from __future__ import annotations

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Mapping, Optional, Sequence

from ..config import DEFAULT_CONFIG, MetricsConfig
from ..exceptions import GitCommandError
from ..git.runner import CommandRunner
from ..logging_config import get_logger
from .churn import aggregate_churn
from .classifier import extract_text_files
from .history import scan_last_committed_at
from .inventory import list_target_files
from .lines import count_lines
from .models import ChurnRecord, ChurnWindow, MetricRecord, MetricsResult
from .window import select_churn_window

logger = get_logger(__name__)

ProgressCallback = Callable[[str], None]


def assemble_records(
    targets: Sequence[str],
    lines_of_code: Mapping[str, int],
    last_committed_at: Mapping[str, str],
    churn: Mapping[str, ChurnRecord],
    number_of_commits: int,
) -> tuple[MetricRecord, ...]:
    """One MetricRecord per target, in target order."""
    records = []
    for path in targets:
        record = churn.get(path, ChurnRecord.zero())
        records.append(
            MetricRecord(
                path=path,
                lines_of_code=lines_of_code.get(path),
                last_committed_at=last_committed_at[path],
                number_of_commits=number_of_commits,
                occurrence=record.occurrence,
                additions=record.additions,
                deletions=record.deletions,
            )
        )
    return tuple(records)


class FileInfoAnalyzer:
    """Compute size, recency and churn for every file in a working tree.

    The tree must be a full (non-shallow) clone checked out at the commit
    to analyze. Any failing git or wc invocation aborts the run with the
    exception it raised; there is no partial result.

    Usage:
        analyzer = FileInfoAnalyzer("/path/to/repo")
        result = analyzer.run()
        for record in result.records:
            print(record.path, record.lines_of_code, record.occurrence)
    """

    def __init__(
        self,
        root: str | Path,
        config: MetricsConfig = DEFAULT_CONFIG,
        runner: Optional[CommandRunner] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.root = Path(root).resolve()
        self.config = config
        self.runner = runner or CommandRunner(self.root)
        self.on_progress = on_progress
        self.durations: dict[str, float] = {}

    def run(self) -> MetricsResult:
        has_commits = self.has_commits()

        if has_commits and self.config.write_commit_graph:
            # Precomputed commit-graph with changed-path Bloom filters speeds
            # up every history query below on large repositories.
            with self._phase("commit_graph", "Generating pre-computed Git metadata cache..."):
                self.runner.git("commit-graph", "write", "--reachable", "--changed-paths")

        with self._phase("inventory", "Listing files..."):
            targets = list_target_files(self.root)

        with self._phase("last_commit", "Analyzing last commit time..."):
            if has_commits:
                last_committed_at = scan_last_committed_at(self.runner, targets)
            else:
                last_committed_at = {path: "" for path in targets}

        with self._phase("lines_of_code", "Analyzing lines of code..."):
            text_files = extract_text_files(self.runner, targets, self.config.batch_size)
            lines_of_code = count_lines(self.runner, text_files, self.config.batch_size)

        window: Optional[ChurnWindow] = None
        churn: dict[str, ChurnRecord] = {}
        number_of_commits = 0
        with self._phase("churn", "Analyzing code churn..."):
            if has_commits:
                window = select_churn_window(
                    self.runner,
                    commit_count=self.config.churn_commit_count,
                    period_days=self.config.churn_period_days,
                )
                churn, number_of_commits = aggregate_churn(self.runner, window)
            else:
                logger.info("Repository has no commits; churn is zero for every file")

        records = assemble_records(
            targets, lines_of_code, last_committed_at, churn, number_of_commits
        )
        return MetricsResult(
            root=self.root,
            records=records,
            window=window,
            number_of_commits=number_of_commits,
            durations=dict(self.durations),
        )

    def has_commits(self) -> bool:
        """False for a freshly initialised repository with no HEAD commit."""
        try:
            self.runner.git("rev-parse", "--verify", "--quiet", "HEAD^{commit}")
        except GitCommandError:
            return False
        return True

    @contextmanager
    def _phase(self, name: str, message: str) -> Iterator[None]:
        logger.info(message)
        if self.on_progress is not None:
            self.on_progress(message)
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.durations[name] = elapsed
            logger.debug("%s done in %.2fs", name, elapsed)
