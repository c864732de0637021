"""
Routing logic for the planning graph.

Decides whether the agent's last message needs tool execution.
"""

import logging
from typing import Literal

from vivaagent.graph.state import PlanningState


logger = logging.getLogger(__name__)


def route_after_agent(state: PlanningState) -> Literal["tools", "complete"]:
    """
    Determine the next node after an agent step.

    Routing logic:
    1. If an error was recorded -> complete
    2. If the last message requests tools and rounds remain -> tools
    3. Otherwise -> complete

    Args:
        state: Current planning state

    Returns:
        Name of the next node to execute
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=planning] [router=route_after_agent] "

    if state.get("errors"):
        logger.info(f"{_log}Routing to 'complete' | errors={len(state['errors'])}")
        return "complete"

    messages = state.get("messages", [])
    last = messages[-1] if messages else {}
    pending_calls = len(last.get("tool_calls") or [])
    rounds = state.get("tool_rounds", 0)
    max_rounds = state.get("max_tool_rounds", 0)

    if pending_calls and rounds < max_rounds:
        logger.info(
            f"{_log}Routing to 'tools' | pending_calls={pending_calls}, "
            f"round={rounds + 1}/{max_rounds}"
        )
        return "tools"

    logger.info(
        f"{_log}Routing to 'complete' | pending_calls={pending_calls}, "
        f"rounds={rounds}/{max_rounds}"
    )
    return "complete"


def route_after_tools(state: PlanningState) -> Literal["agent", "complete"]:
    """
    Determine the next node after tool execution.

    A failed tool call ends the run; otherwise the agent sees the results.
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=planning] [router=route_after_tools] "

    if state.get("errors"):
        logger.info(f"{_log}Routing to 'complete' | errors={len(state['errors'])}")
        return "complete"

    logger.info(f"{_log}Routing to 'agent'")
    return "agent"
