"""
Nodes of the planning graph.

Each node takes the current state plus its collaborators (chat model,
tool adapter) and returns a dict of state updates. Failures are recorded
in `errors` instead of raised, so the graph always reaches `complete`.
"""

import logging
import time
from typing import Any, Dict

from vivaagent.graph.state import PlanningState
from vivaagent.shared.logging.config import log_tool_call
from vivaagent.tools.adapter import AgentToolAdapter, serialize_tool_output


logger = logging.getLogger(__name__)


async def agent_node(
    state: PlanningState, chat_model: Any, tool_adapter: AgentToolAdapter
) -> Dict[str, Any]:
    """
    Run one LLM completion with the tool schemas attached.

    Args:
        state: Current planning state
        chat_model: Object with an async `complete(messages, tools)` method
        tool_adapter: Source of the tool definitions

    Returns:
        State updates with the assistant message, and the plan when the
        model answered without requesting tools
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=planning] [node=agent] "

    tools = [definition.to_openai_tool() for definition in tool_adapter.definitions()]
    logger.info(
        f"{_log}Calling LLM | messages={len(state['messages'])}, "
        f"tools={len(tools)}, round={state.get('tool_rounds', 0)}"
    )

    try:
        start_time = time.perf_counter()
        message = await chat_model.complete(state["messages"], tools=tools)
        duration_ms = (time.perf_counter() - start_time) * 1000
    except Exception as e:
        logger.exception(f"{_log}LLM call failed: {e}")
        return {
            "current_step": "agent_failed",
            "errors": [f"Agent execution failed: {e}"],
        }

    tool_calls = message.get("tool_calls") or []
    logger.info(
        f"{_log}LLM responded | duration={duration_ms:.0f}ms, tool_calls={len(tool_calls)}"
    )

    update: Dict[str, Any] = {"messages": [message], "current_step": "agent"}
    if not tool_calls:
        update["plan"] = message.get("content") or ""
    return update


async def tools_node(state: PlanningState, tool_adapter: AgentToolAdapter) -> Dict[str, Any]:
    """
    Execute the tool calls requested by the last assistant message.

    Calls run one after another in the order the model listed them. The
    first failure stops the round and is recorded as an error.

    Args:
        state: Current planning state
        tool_adapter: Adapter that executes the tools

    Returns:
        State updates with one tool message per call
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=planning] [node=tools] "

    last = state["messages"][-1]
    tool_calls = last.get("tool_calls") or []
    rounds = state.get("tool_rounds", 0) + 1
    logger.info(f"{_log}Entering node | round={rounds}, tool_calls={len(tool_calls)}")

    tool_messages = []
    for call in tool_calls:
        name = call["function"]["name"]
        arguments = call["function"].get("arguments")
        log_tool_call("tool_start", name, session_id=session_id)

        try:
            output = await tool_adapter.call(name, arguments)
        except Exception as e:
            logger.exception(f"{_log}Tool '{name}' failed: {e}")
            log_tool_call(
                "tool_failed",
                name,
                session_id=session_id,
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            return {
                "tool_rounds": rounds,
                "current_step": "tools_failed",
                "errors": [f"{type(e).__name__}: {e}"],
            }

        log_tool_call(
            "tool_complete", name, session_id=session_id, extra={"results": len(output)}
        )
        tool_messages.append(
            {
                "role": "tool",
                "tool_call_id": call["id"],
                "content": serialize_tool_output(output),
            }
        )

    logger.info(f"{_log}Node finished | tool_messages={len(tool_messages)}")
    return {
        "messages": tool_messages,
        "tool_rounds": rounds,
        "current_step": "tools",
    }


def complete_node(state: PlanningState) -> Dict[str, Any]:
    """
    Final node that marks the planning run as complete.

    Records an error when the run stopped without a plan and without any
    other error (tool round limit reached).
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=planning] [node=complete] "

    has_plan = state.get("plan") is not None
    num_errors = len(state.get("errors", []))

    logger.info(
        f"{_log}Planning complete | plan={'done' if has_plan else 'MISSING'}, "
        f"rounds={state.get('tool_rounds', 0)}, errors={num_errors} -> END"
    )

    update: Dict[str, Any] = {"current_step": "complete"}
    if not has_plan and num_errors == 0:
        update["errors"] = [
            f"Agent stopped after {state.get('tool_rounds', 0)} tool rounds without a final answer"
        ]
    return update
