"""
Planning graph construction.

Builds the graph that alternates LLM completions and tool execution
until the model produces the final plan.
"""

import uuid
from datetime import date
from typing import Any, Dict, Optional

from langgraph.graph import StateGraph, END

from vivaagent.graph.config import PlanningGraphConfig, DEFAULT_CONFIG
from vivaagent.graph.nodes import agent_node, tools_node, complete_node
from vivaagent.graph.prompts import build_agent_instructions
from vivaagent.graph.router import route_after_agent, route_after_tools
from vivaagent.graph.state import PlanningState
from vivaagent.tools.adapter import AgentToolAdapter


def create_initial_state(
    objective: str,
    reference_date: date,
    session_id: Optional[str] = None,
    config: Optional[PlanningGraphConfig] = None,
) -> PlanningState:
    """
    Build the initial planning state for an objective.

    Args:
        objective: Free-text planning objective from the user
        reference_date: Date the instructions present as "today"
        session_id: Optional session id (generated if omitted)
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.

    Returns:
        Initial PlanningState dictionary
    """
    if config is None:
        config = DEFAULT_CONFIG

    return {
        "objective": objective,
        "messages": [
            {"role": "system", "content": build_agent_instructions(reference_date)},
            {"role": "user", "content": objective},
        ],
        "tool_rounds": 0,
        "max_tool_rounds": config.max_tool_rounds,
        "plan": None,
        "current_step": "starting",
        "errors": [],
        "session_id": session_id or str(uuid.uuid4()),
    }


def create_planning_graph(chat_model: Any, tool_adapter: AgentToolAdapter):
    """
    Create and compile the planning graph.

    The graph structure is:
        Entry -> agent -> route_after_agent
          -> "tools"    -> tools -> route_after_tools
                                   -> "agent"    -> agent
                                   -> "complete" -> complete
          -> "complete" -> complete -> END

    Args:
        chat_model: Object with an async `complete(messages, tools)` method
        tool_adapter: Adapter executing the agent's tool calls

    Returns:
        Compiled LangGraph application ready for execution.
    """

    async def _agent(state: PlanningState) -> Dict[str, Any]:
        return await agent_node(state, chat_model, tool_adapter)

    async def _tools(state: PlanningState) -> Dict[str, Any]:
        return await tools_node(state, tool_adapter)

    graph = StateGraph(PlanningState)

    graph.add_node("agent", _agent)
    graph.add_node("tools", _tools)
    graph.add_node("complete", complete_node)

    graph.set_entry_point("agent")

    graph.add_conditional_edges(
        "agent",
        route_after_agent,
        {
            "tools": "tools",
            "complete": "complete",
        },
    )

    graph.add_conditional_edges(
        "tools",
        route_after_tools,
        {
            "agent": "agent",
            "complete": "complete",
        },
    )

    graph.add_edge("complete", END)

    return graph.compile()
