"""Shared fixtures for the changelog agent tests."""

from pathlib import Path
from typing import Callable, List, Optional, Union

import pytest
from git import Actor, Repo
from langchain_core.messages import AIMessage, BaseMessage


def create_commit(
    repo: Repo,
    file_path: Path,
    content: str,
    message: str,
    author: str = "Test Author",
    date: Optional[str] = None,
):
    """Helper function to create a commit in the test repository.

    ``date`` uses git's internal "<epoch> <offset>" format.
    """
    file_path.write_text(content)
    repo.index.add([str(file_path.relative_to(repo.working_dir))])
    actor = Actor(author, f"{author.lower().replace(' ', '.')}@example.com")
    kwargs = {"author": actor, "committer": actor}
    if date:
        kwargs.update(author_date=date, commit_date=date)
    return repo.index.commit(message, **kwargs)


def tool_call_message(call_id: str = "call_1", name: str = "get_commits") -> AIMessage:
    """An assistant message asking for one tool call."""
    return AIMessage(content="", tool_calls=[{"name": name, "args": {}, "id": call_id}])


class ScriptedChatModel:
    """Stands in for a chat model: replays scripted responses and records calls."""

    def __init__(self, responses: List[Union[BaseMessage, Callable[[List[BaseMessage]], BaseMessage]]]):
        self.responses = list(responses)
        self.calls: List[List[BaseMessage]] = []
        self.bound_tools = None

    def bind_tools(self, tools, **kwargs):
        self.bound_tools = tools
        return self

    async def ainvoke(self, messages, *args, **kwargs):
        self.calls.append(list(messages))
        if not self.responses:
            raise AssertionError("ScriptedChatModel ran out of responses")
        response = self.responses[0]
        if callable(response):
            return response(messages)
        self.responses.pop(0)
        return response


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a basic temporary Git repository."""
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()
    return Repo.init(repo_path)


@pytest.fixture
def history_repo(temp_git_repo):
    """Repository with three recent commits by two authors, one of them WIP."""
    repo = temp_git_repo
    test_file = Path(repo.working_dir) / "app.py"

    create_commit(repo, test_file, "print('hello')\n", "Initial commit", author="Alice")
    create_commit(repo, test_file, "print('hello world')\n", "Fix greeting", author="Alice")
    create_commit(repo, test_file, "print('hello world!')\n", "WIP: punctuation", author="Bob")

    return repo


@pytest.fixture
def make_commit():
    """Expose the commit helper to tests."""
    return create_commit


@pytest.fixture
def scripted_model():
    """Factory for scripted chat models."""
    return ScriptedChatModel


@pytest.fixture
def tool_call():
    """Factory for assistant messages requesting a tool."""
    return tool_call_message
