"""Tools node: executes the tool calls requested by the last model message."""

from typing import Any, Dict, List

from langchain_core.messages import AIMessage, ToolMessage
from loguru import logger

from changelog_agent.models.state import AgentState
from changelog_agent.tools.registry import ToolRegistry


class ToolsNode:
    """Node that answers every pending tool call with exactly one tool message."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def run(self, state: AgentState) -> Dict[str, Any]:
        """Execute pending tool calls in order, one at a time."""
        logger.info("Executing Tools Node")
        last_message = state["messages"][-1] if state["messages"] else None
        if not isinstance(last_message, AIMessage):
            raise ValueError("Tools node expects the last message to come from the model")

        results: List[ToolMessage] = []
        for call in last_message.tool_calls:
            logger.debug(f"Running tool {call['name']} for call {call['id']}")
            output = self.registry.execute(call["name"], call.get("args"))
            results.append(
                ToolMessage(
                    content=output.content,
                    tool_call_id=call["id"],
                    name=call["name"],
                    status="error" if output.is_error else "success",
                )
            )

        return {"messages": results}


def load_tools_node(registry: ToolRegistry) -> ToolsNode:
    """Factory function to create a configured ToolsNode."""
    return ToolsNode(registry)
