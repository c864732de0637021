"""Tools exposed to the planning agent."""

from vivaagent.tools.adapter import AgentToolAdapter, serialize_tool_output
from vivaagent.tools.definitions import (
    SEARCH_TOOL_NAME,
    TIMELINESS_TOOL_NAME,
    ToolDefinition,
    search_tool_definition,
    timeliness_tool_definition,
)

__all__ = [
    "AgentToolAdapter",
    "serialize_tool_output",
    "SEARCH_TOOL_NAME",
    "TIMELINESS_TOOL_NAME",
    "ToolDefinition",
    "search_tool_definition",
    "timeliness_tool_definition",
]
