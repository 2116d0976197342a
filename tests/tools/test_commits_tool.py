"""Tests for the get_commits tool."""

import json

from changelog_agent.models.query import HistoryQuery
from changelog_agent.tools.commits import GET_COMMITS, create_tool_registry


def test_registry_holds_only_get_commits(tmp_path):
    registry = create_tool_registry(str(tmp_path), HistoryQuery())

    assert registry.descriptors == [GET_COMMITS]
    assert GET_COMMITS.name == "get_commits"
    assert GET_COMMITS.input_schema == {"type": "object", "properties": {}}


def test_get_commits_returns_json_with_diffs(history_repo):
    registry = create_tool_registry(history_repo.working_dir, HistoryQuery(num_commits=3, exclude_pattern="WIP"))

    output = registry.execute("get_commits", {})
    commits = json.loads(output.content)

    assert not output.is_error
    assert [c["message"] for c in commits] == ["Fix greeting", "Initial commit"]
    assert set(commits[0]) == {"hash", "message", "date", "author", "diff"}
    assert commits[0]["author"] == "Alice"
    assert "hello world" in commits[0]["diff"]


def test_get_commits_reports_extraction_failure(tmp_path):
    registry = create_tool_registry(str(tmp_path / "missing"), HistoryQuery())

    output = registry.execute("get_commits", {})

    assert output.is_error
    assert output.content.startswith("Error getting commits: ")
