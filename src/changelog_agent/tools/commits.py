"""The ``get_commits`` tool backed by the commit history extractor."""

import json
from typing import Callable

from changelog_agent.errors import CommitExtractionError
from changelog_agent.history import get_git_commits
from changelog_agent.models.query import HistoryQuery
from changelog_agent.models.result import ToolResult
from changelog_agent.tools.registry import ToolDescriptor, ToolRegistry, ToolSpec

GET_COMMITS = ToolDescriptor(
    name="get_commits",
    description=(
        "Get recent git commits from a repository. This will return a JSON array of commits "
        "that include the commit hash, message, date, and author. It will also include the diff"
    ),
)


def make_get_commits_handler(repo_path: str, query: HistoryQuery) -> Callable[[], ToolResult]:
    """Bind the repository and window so the tool itself takes no input."""

    def get_commits() -> ToolResult:
        try:
            commits = get_git_commits(repo_path, query)
        except CommitExtractionError as e:
            return ToolResult.err(e.kind, e.detail)
        return ToolResult.ok(json.dumps([commit.to_dict() for commit in commits]))

    return get_commits


def create_tool_registry(repo_path: str, query: HistoryQuery) -> ToolRegistry:
    """Registry holding the single ``get_commits`` tool."""
    return ToolRegistry(
        [
            ToolSpec(
                descriptor=GET_COMMITS,
                handler=make_get_commits_handler(repo_path, query),
                error_prefix="Error getting commits",
            )
        ]
    )
