"""Run configuration for the changelog agent."""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from changelog_agent.errors import ConfigurationError
from changelog_agent.models.query import HistoryQuery

DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_THREAD_ID = "changelog"
DEFAULT_MAX_TOOL_ROUNDS = 10


def build_query(
    num_days: Optional[int] = None,
    num_commits: Optional[int] = None,
    exclude_pattern: Optional[str] = None,
) -> HistoryQuery:
    """Validate the lookback window, turning pydantic errors into ConfigurationError."""
    try:
        return HistoryQuery(num_days=num_days, num_commits=num_commits, exclude_pattern=exclude_pattern)
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise ConfigurationError(f"Invalid history window: {messages}") from e


def load_config(
    repo_path: str,
    num_days: Optional[int] = None,
    num_commits: Optional[int] = None,
    exclude_pattern: Optional[str] = None,
    model: Optional[str] = None,
    thread_id: str = DEFAULT_THREAD_ID,
    max_tool_rounds: int = DEFAULT_MAX_TOOL_ROUNDS,
) -> Dict[str, Any]:
    """Build the run config from arguments and the environment (.env included)."""
    load_dotenv()
    groq_api_key = os.getenv("GROQ_API_KEY")
    if not groq_api_key:
        raise ConfigurationError("GROQ_API_KEY environment variable is not set")
    if max_tool_rounds < 1:
        raise ConfigurationError("max_tool_rounds must be at least 1")

    return {
        "repo_path": repo_path,
        "groq_api_key": groq_api_key,
        "model": model or os.getenv("CHANGELOG_MODEL") or DEFAULT_MODEL,
        "query": build_query(num_days, num_commits, exclude_pattern),
        "thread_id": thread_id,
        "max_tool_rounds": max_tool_rounds,
    }
