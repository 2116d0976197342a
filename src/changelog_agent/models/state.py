"""State types for the changelog conversation graph."""

from enum import Enum
from typing import Annotated, List, Sequence, TypedDict

from langchain_core.messages import AIMessage, AnyMessage, BaseMessage
from langgraph.graph import END, START
from langgraph.graph.message import add_messages


class Step(str, Enum):
    """Steps of the conversation loop, named after their graph nodes."""

    START = START
    AGENT = "agent"
    TOOLS = "tools"
    END = END


class AgentState(TypedDict):
    """
    Shared state passed between nodes.
    The reducer appends new messages and merges any that share an id.
    """

    messages: Annotated[List[AnyMessage], add_messages]


def next_step(messages: Sequence[BaseMessage]) -> Step:
    """Decide where to go after the agent step, from the last message alone."""
    if not messages:
        return Step.END
    last_message = messages[-1]
    if isinstance(last_message, AIMessage) and last_message.tool_calls:
        return Step.TOOLS
    return Step.END
