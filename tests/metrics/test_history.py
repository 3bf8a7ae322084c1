"""Tests for the last-commit-time scanner."""

from datetime import timezone

import pytest

from churnscope.exceptions import HistoryParseError
from churnscope.metrics.history import (
    build_last_committed_at,
    later_timestamp,
    parse_commit_record,
    parse_iso8601,
    scan_last_committed_at,
)

# Five commits newest first; the 12:51:28 and 12:50:35 commits change no files.
SAMPLE_LOG = (
    "2021-12-20T12:51:39+09:00\nC\0\0"
    "2021-12-20T12:51:28+09:00\0" "2021-12-20T12:51:09+09:00\nB\0\0"
    "2021-12-20T12:50:58+09:00\nA\0\0"
    "2021-12-20T12:50:35+09:00"
)


class TestParseCommitRecord:
    def test_plain_record(self):
        date, paths = parse_commit_record("2021-12-20T12:51:39+09:00\nC\0D\0")
        assert date == "2021-12-20T12:51:39+09:00"
        assert paths == ["C", "D"]

    def test_empty_commit_date_sticks_to_next_record(self):
        """The last NUL-separated date owns the path list."""
        record = "2021-12-20T12:51:28+09:00\x002021-12-20T12:51:09+09:00\nB"
        date, paths = parse_commit_record(record)
        assert date == "2021-12-20T12:51:09+09:00"
        assert paths == ["B"]

    def test_record_without_paths(self):
        date, paths = parse_commit_record("2021-12-20T12:50:35+09:00")
        assert date == "2021-12-20T12:50:35+09:00"
        assert paths == []

    def test_paths_with_spaces_and_unicode(self):
        _, paths = parse_commit_record("2024-01-01T00:00:00+00:00\nmy file.txt\0docs/日本語.md\0")
        assert paths == ["my file.txt", "docs/日本語.md"]

    def test_missing_date_is_fatal(self):
        with pytest.raises(HistoryParseError, match="commit date"):
            parse_commit_record("\nsome/path")

    def test_empty_record_is_fatal(self):
        with pytest.raises(HistoryParseError):
            parse_commit_record("")


class TestLaterTimestamp:
    def test_empty_current_takes_candidate(self):
        assert later_timestamp("", "2024-01-01T00:00:00+00:00") == "2024-01-01T00:00:00+00:00"

    def test_empty_candidate_keeps_current(self):
        assert later_timestamp("2024-01-01T00:00:00+00:00", "") == "2024-01-01T00:00:00+00:00"

    def test_both_empty(self):
        assert later_timestamp("", "") == ""

    def test_compares_instants_not_strings(self):
        tokyo = "2024-01-01T10:00:00+09:00"  # 01:00 UTC
        london = "2024-01-01T02:00:00+00:00"  # 02:00 UTC
        # As strings tokyo sorts later, as instants london is later.
        assert tokyo > london
        assert later_timestamp(tokyo, london) == london
        assert later_timestamp(london, tokyo) == london

    def test_equal_instants_keep_current(self):
        current = "2024-01-01T09:00:00+09:00"
        candidate = "2024-01-01T00:00:00+00:00"
        assert later_timestamp(current, candidate) == current

    def test_invalid_timestamp_raises(self):
        with pytest.raises(HistoryParseError):
            later_timestamp("2024-01-01T00:00:00+00:00", "yesterday")


class TestParseIso8601:
    def test_offset_preserved(self):
        parsed = parse_iso8601("2021-12-20T12:51:39+09:00")
        assert parsed.utcoffset().total_seconds() == 9 * 3600

    def test_zulu_suffix(self):
        assert parse_iso8601("2024-01-01T00:00:00Z").tzinfo is not None
        assert parse_iso8601("2024-01-01T00:00:00Z").astimezone(timezone.utc).hour == 0

    def test_naive_timestamp_rejected(self):
        with pytest.raises(HistoryParseError):
            parse_iso8601("2024-01-01T00:00:00")


class TestBuildLastCommittedAt:
    def test_sample_log(self):
        result = build_last_committed_at(SAMPLE_LOG, ["A", "B", "C"])
        assert result == {
            "A": "2021-12-20T12:50:58+09:00",
            "B": "2021-12-20T12:51:09+09:00",
            "C": "2021-12-20T12:51:39+09:00",
        }

    def test_every_target_is_seeded(self):
        result = build_last_committed_at(SAMPLE_LOG, ["A", "never-committed.txt"])
        assert result["never-committed.txt"] == ""

    def test_deleted_paths_ignored(self):
        result = build_last_committed_at(SAMPLE_LOG, ["A"])
        assert set(result) == {"A"}

    def test_keeps_maximum_regardless_of_traversal_order(self):
        t1 = "2024-01-01T00:00:00+00:00"
        t2 = "2024-02-01T00:00:00+00:00"
        t3 = "2024-03-01T00:00:00+00:00"
        # Commit dates can be out of order in the log (rebases, clock skew).
        log = f"{t2}\nf.py\0\0{t3}\nf.py\0\0{t1}\nf.py\0"
        assert build_last_committed_at(log, ["f.py"]) == {"f.py": t3}

    def test_empty_output_leaves_all_empty(self):
        assert build_last_committed_at("", ["a", "b"]) == {"a": "", "b": ""}

    def test_record_without_date_aborts(self):
        log = "2024-01-01T00:00:00+00:00\na\0\0\nb\0"
        with pytest.raises(HistoryParseError):
            build_last_committed_at(log, ["a", "b"])


class TestScanLastCommittedAt:
    def test_runs_single_bulk_log(self, fake_runner):
        runner = fake_runner(git=lambda args: SAMPLE_LOG)
        result = scan_last_committed_at(runner, ["A", "C"])

        assert result == {"A": "2021-12-20T12:50:58+09:00", "C": "2021-12-20T12:51:39+09:00"}
        assert len(runner.git_calls) == 1
        args = runner.git_calls[0]
        assert args[0] == "log"
        assert "--name-only" in args
        assert "-z" in args
        assert "--format=format:%aI" in args
