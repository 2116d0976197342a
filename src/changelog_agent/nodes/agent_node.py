"""Agent node: asks the chat model for the next move in the conversation."""

from typing import Any, Dict, List

from langchain_core.language_models import BaseChatModel
from langchain_groq import ChatGroq
from loguru import logger

from changelog_agent.models.state import AgentState
from changelog_agent.tools.registry import ToolDescriptor


def create_chat_model(config: Dict[str, Any]) -> BaseChatModel:
    """Create the Groq chat model with deterministic sampling."""
    if "groq_api_key" not in config:
        raise ValueError("groq_api_key is required in config")
    return ChatGroq(groq_api_key=config["groq_api_key"], model=config["model"], temperature=0)


class AgentNode:
    """Node that sends the whole conversation to a tool-aware chat model."""

    def __init__(self, llm: Any, tools: List[ToolDescriptor]):
        """Bind the tool descriptors to the model once."""
        self.tools = list(tools)
        self.model = llm.bind_tools([tool.to_openai_tool() for tool in self.tools])

    async def run(self, state: AgentState) -> Dict[str, Any]:
        """Invoke the model; errors from the model propagate to the caller."""
        logger.info("Executing Agent Node")
        messages = state["messages"]
        response = await self.model.ainvoke(messages)

        tool_calls = getattr(response, "tool_calls", None) or []
        if tool_calls:
            logger.debug(f"Model requested tools: {[call['name'] for call in tool_calls]}")
        else:
            logger.debug("Model returned a final answer")

        # A list, because the messages reducer appends it to the existing history
        return {"messages": [response]}


def load_agent_node(llm: Any, tools: List[ToolDescriptor]) -> AgentNode:
    """Factory function to create a configured AgentNode."""
    return AgentNode(llm, tools)
