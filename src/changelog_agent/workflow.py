"""Changelog agent workflow using LangGraph for orchestration."""

import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langgraph.errors import GraphRecursionError
from langgraph.graph import StateGraph
from loguru import logger

from changelog_agent.checkpoint import ConversationStore
from changelog_agent.config import DEFAULT_MAX_TOOL_ROUNDS, DEFAULT_THREAD_ID, load_config
from changelog_agent.errors import ChangelogError, ToolLoopLimitError
from changelog_agent.models.state import AgentState, Step, next_step
from changelog_agent.nodes.agent_node import create_chat_model, load_agent_node
from changelog_agent.nodes.tools_node import load_tools_node
from changelog_agent.tools.commits import create_tool_registry
from changelog_agent.tools.registry import ToolRegistry

SYSTEM_PROMPT = (
    "You are an expert in generating customer facing changelogs. You are provided the tools to look at "
    "the recent commits in a git repository. Please focus on providing context for the changes, and the "
    "motivation for the changes."
)

HUMAN_PROMPT = (
    "Please summarize the recent work done. Provide only a bulleted list. Add the author at the end of "
    "the list item in the format: - [@author]"
)


def seed_messages() -> List[BaseMessage]:
    """Opening system instruction and user request."""
    return [SystemMessage(SYSTEM_PROMPT), HumanMessage(HUMAN_PROMPT)]


def route_after_agent(state: AgentState) -> str:
    """Conditional edge out of the agent node."""
    return next_step(state["messages"]).value


def recursion_limit_for(max_tool_rounds: int) -> int:
    # One agent step, a tools step and an agent step per round, plus the
    # step on which LangGraph checks the limit
    return 2 * max_tool_rounds + 2


def create_workflow(llm: Any, registry: ToolRegistry, store: ConversationStore):
    """Create the agent/tools loop and compile it against the store's checkpointer."""
    agent = load_agent_node(llm, registry.descriptors)
    tools = load_tools_node(registry)

    workflow = StateGraph(AgentState)

    # Add nodes
    workflow.add_node(Step.AGENT.value, agent.run)
    workflow.add_node(Step.TOOLS.value, tools.run)

    # Define edges
    workflow.add_edge(Step.START.value, Step.AGENT.value)
    workflow.add_conditional_edges(
        Step.AGENT.value,
        route_after_agent,
        {Step.TOOLS.value: Step.TOOLS.value, Step.END.value: Step.END.value},
    )
    workflow.add_edge(Step.TOOLS.value, Step.AGENT.value)

    return workflow.compile(checkpointer=store.checkpointer)


def message_text(message: BaseMessage) -> str:
    """Plain text of a message whose content may be a list of parts."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


async def run_workflow_async(
    config: Dict[str, Any],
    llm: Optional[Any] = None,
    store: Optional[ConversationStore] = None,
) -> str:
    """Run the changelog conversation and return the model's final content."""
    store = store or ConversationStore(config.get("thread_id", DEFAULT_THREAD_ID))
    llm = llm if llm is not None else create_chat_model(config)
    max_tool_rounds = config.get("max_tool_rounds", DEFAULT_MAX_TOOL_ROUNDS)

    registry = create_tool_registry(config["repo_path"], config["query"])
    app = create_workflow(llm, registry, store)

    initial_state: AgentState = {"messages": seed_messages()}
    run_config = store.run_config(recursion_limit=recursion_limit_for(max_tool_rounds))

    final_state = None
    try:
        async for state in app.astream(initial_state, run_config, stream_mode="values"):
            final_state = state
            logger.debug(f"Conversation has {len(state['messages'])} messages")
    except GraphRecursionError as e:
        raise ToolLoopLimitError(max_tool_rounds) from e

    return message_text(final_state["messages"][-1])


def run_workflow(config: Dict[str, Any], llm: Optional[Any] = None, store: Optional[ConversationStore] = None) -> str:
    """Synchronous wrapper for the async workflow."""
    return asyncio.run(run_workflow_async(config, llm=llm, store=store))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="changelog",
        description="Summarize recent changes in a git repository and generate a changelog",
    )
    parser.add_argument("repo_path", type=str, help="Path to the Git repository")
    window = parser.add_mutually_exclusive_group()
    window.add_argument("-s", "--num-days", type=int, help="Number of days to look back (default: 7)")
    window.add_argument("-n", "--num-commits", type=int, help="Number of commits to look back")
    parser.add_argument("-e", "--exclude", type=str, help="Exclude commits whose messages contain this text")
    parser.add_argument("--model", type=str, help="Groq model to use (default: $CHANGELOG_MODEL or llama-3.3-70b-versatile)")
    parser.add_argument("--thread-id", type=str, default=DEFAULT_THREAD_ID, help="Conversation thread id")
    parser.add_argument(
        "--max-tool-rounds",
        type=int,
        default=DEFAULT_MAX_TOOL_ROUNDS,
        help="Give up if the model keeps calling tools for more rounds than this",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def resolve_repo_path(repo_path: str) -> str:
    """Absolute repository path; raises ChangelogError if it is not a git checkout."""
    full_path = repo_path if os.path.isabs(repo_path) else os.path.join(os.getcwd(), repo_path)
    if not os.path.exists(full_path):
        raise ChangelogError(f"File not found at path: {full_path}")
    if not os.path.exists(os.path.join(full_path, ".git")):
        raise ChangelogError(f"No git repository found at {full_path}")
    return full_path


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if not args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        config = load_config(
            resolve_repo_path(args.repo_path),
            num_days=args.num_days,
            num_commits=args.num_commits,
            exclude_pattern=args.exclude,
            model=args.model,
            thread_id=args.thread_id,
            max_tool_rounds=args.max_tool_rounds,
        )
        logger.info(f"Analyzing repository: {config['repo_path']} ({config['query'].describe()})")
        summary = run_workflow(config)
    except Exception as e:
        logger.error(f"Error: {str(e)}")
        sys.exit(1)

    print(summary)


if __name__ == "__main__":
    main()
