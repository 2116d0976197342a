"""Tests for the conversation checkpoint store."""

import pytest
from langgraph.checkpoint.memory import MemorySaver

from changelog_agent.checkpoint import ConversationStore


def test_run_config_selects_thread():
    store = ConversationStore("run-7")

    assert store.run_config() == {"configurable": {"thread_id": "run-7"}}
    assert store.run_config(recursion_limit=22)["recursion_limit"] == 22


def test_uses_given_checkpointer():
    saver = MemorySaver()

    assert ConversationStore("run-7", checkpointer=saver).checkpointer is saver


def test_thread_id_is_required():
    with pytest.raises(ValueError):
        ConversationStore("")


@pytest.mark.asyncio
async def test_unknown_thread_has_no_messages():
    assert await ConversationStore("never-run").messages() == []
