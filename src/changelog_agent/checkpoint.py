"""Conversation checkpoint store keyed by thread id."""

from typing import Any, Dict, List, Optional

from langchain_core.messages import BaseMessage
from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.checkpoint.memory import MemorySaver


class ConversationStore:
    """Holds one thread's conversation state through a LangGraph checkpointer.

    Defaults to an in-memory saver; any other ``BaseCheckpointSaver`` can be
    passed in. A thread id must not be shared by two runs writing at once.
    """

    def __init__(self, thread_id: str, checkpointer: Optional[BaseCheckpointSaver] = None):
        if not thread_id:
            raise ValueError("thread_id must be a non-empty string")
        self.thread_id = thread_id
        self.checkpointer = checkpointer if checkpointer is not None else MemorySaver()

    def run_config(self, recursion_limit: Optional[int] = None) -> Dict[str, Any]:
        """Runnable config selecting this store's thread."""
        config: Dict[str, Any] = {"configurable": {"thread_id": self.thread_id}}
        if recursion_limit is not None:
            config["recursion_limit"] = recursion_limit
        return config

    async def messages(self) -> List[BaseMessage]:
        """Messages last checkpointed for this thread, empty if none."""
        checkpoint_tuple = await self.checkpointer.aget_tuple(self.run_config())
        if checkpoint_tuple is None:
            return []
        return list(checkpoint_tuple.checkpoint["channel_values"].get("messages", []))
