"""Per-file size, recency and churn metrics from git history."""

from .assembler import FileInfoAnalyzer, assemble_records
from .churn import aggregate_churn, parse_numstat
from .classifier import extract_text_files, parse_eol_output
from .history import later_timestamp, parse_commit_record, scan_last_committed_at
from .inventory import list_target_files
from .lines import count_lines, parse_wc_output
from .models import ChurnRecord, ChurnWindow, MetricRecord, MetricsResult
from .window import CHURN_COMMIT_COUNT, CHURN_PERIOD_IN_DAYS, select_churn_window

__all__ = [
    "FileInfoAnalyzer",
    "MetricsResult",
    "MetricRecord",
    "ChurnRecord",
    "ChurnWindow",
    "CHURN_COMMIT_COUNT",
    "CHURN_PERIOD_IN_DAYS",
    "list_target_files",
    "extract_text_files",
    "parse_eol_output",
    "scan_last_committed_at",
    "parse_commit_record",
    "later_timestamp",
    "select_churn_window",
    "aggregate_churn",
    "parse_numstat",
    "count_lines",
    "parse_wc_output",
    "assemble_records",
]
