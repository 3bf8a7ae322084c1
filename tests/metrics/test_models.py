"""Tests for metric data models."""

from pathlib import Path

import pytest

from churnscope.metrics.models import ISSUE_ID, ChurnRecord, MetricRecord, MetricsResult


def make_record(path="a.txt", loc=5, last="2024-01-01T00:00:00+00:00"):
    return MetricRecord(
        path=path,
        lines_of_code=loc,
        last_committed_at=last,
        number_of_commits=3,
        occurrence=1,
        additions=5,
        deletions=0,
    )


class TestChurnRecord:
    def test_zero(self):
        assert ChurnRecord.zero() == ChurnRecord(0, 0, 0)

    def test_add_returns_new_record(self):
        base = ChurnRecord.zero()
        updated = base.add(3, 1).add(2, 0)
        assert updated == ChurnRecord(occurrence=2, additions=5, deletions=1)
        assert base == ChurnRecord.zero()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ChurnRecord.zero().occurrence = 3


class TestMetricRecord:
    def test_message(self):
        assert make_record().message == (
            "a.txt: loc = 5, last commit datetime = 2024-01-01T00:00:00+00:00"
        )

    def test_message_without_line_count(self):
        assert "loc = (no info)" in make_record(path="b.bin", loc=None).message

    def test_zero_lines_is_not_no_info(self):
        assert "loc = 0," in make_record(loc=0).message

    def test_to_dict_fields(self):
        assert make_record(loc=None).to_dict() == {
            "lines_of_code": None,
            "last_committed_at": "2024-01-01T00:00:00+00:00",
            "number_of_commits": 3,
            "occurrence": 1,
            "additions": 5,
            "deletions": 0,
        }


class TestMetricsResult:
    def test_issues_shape(self):
        result = MetricsResult(root=Path("/repo"), records=(make_record(), make_record("b.txt")))
        issues = result.issues()

        assert [i["path"] for i in issues] == ["a.txt", "b.txt"]
        assert issues[0]["id"] == ISSUE_ID
        assert issues[0]["location"] is None
        assert issues[0]["object"]["lines_of_code"] == 5

    def test_by_path_and_len(self):
        result = MetricsResult(root=Path("/repo"), records=(make_record(), make_record("b.txt")))
        assert len(result) == 2
        assert result.by_path()["b.txt"].path == "b.txt"
