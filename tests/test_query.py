"""Tests for the history window model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from changelog_agent.models.query import DEFAULT_NUM_DAYS, HistoryQuery


def test_defaults_to_day_count_mode():
    query = HistoryQuery()

    assert not query.by_commit_count
    assert query.effective_days == DEFAULT_NUM_DAYS == 7
    assert query.describe() == "last 7 days"


def test_commit_count_mode():
    query = HistoryQuery(num_commits=3, exclude_pattern="WIP")

    assert query.by_commit_count
    assert query.selection_args() == ["-n", "3"]
    assert query.describe() == "last 3 commits excluding 'WIP'"


def test_both_modes_are_rejected():
    with pytest.raises(ValidationError, match="Cannot specify both"):
        HistoryQuery(num_days=3, num_commits=10)


@pytest.mark.parametrize("field", ["num_days", "num_commits"])
def test_counts_must_be_positive(field):
    with pytest.raises(ValidationError):
        HistoryQuery(**{field: 0})


def test_empty_exclude_pattern_is_ignored():
    assert HistoryQuery(exclude_pattern="").exclude_pattern is None


def test_since_is_relative_to_now():
    now = datetime(2024, 3, 10, tzinfo=timezone.utc)

    assert HistoryQuery(num_days=10).since(now) == datetime(2024, 2, 29, tzinfo=timezone.utc)
