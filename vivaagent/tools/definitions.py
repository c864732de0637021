"""
Tool definitions.

Each tool is described as plain data (name, description, JSON schema for
its parameters) so any orchestration layer can consume it. The OpenAI
function-calling shape is produced by ToolDefinition.to_openai_tool().
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from vivaagent.shared.contracts.conference import ConferenceSource


SEARCH_TOOL_NAME = "query_vivatech_api"
TIMELINESS_TOOL_NAME = "assess_event_timeliness"


class ToolDefinition(BaseModel):
    """Machine-readable capability record for one tool."""

    name: str = Field(description="Tool name the agent uses to call it")
    description: str = Field(description="What the tool does and when to use it")
    parameters: Dict[str, Any] = Field(description="JSON schema of the arguments")

    def to_openai_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


# ============================================================================
# Argument models
# ============================================================================


class QueryVivatechArgs(BaseModel):
    """Arguments of the search tool."""

    query: str = Field(description="Search term")


class AssessTimelinessArgs(BaseModel):
    """Arguments of the timeliness tool."""

    events: List[ConferenceSource] = Field(description="Events to assess")


# ============================================================================
# Definitions
# ============================================================================


def search_tool_definition() -> ToolDefinition:
    return ToolDefinition(
        name=SEARCH_TOOL_NAME,
        description=(
            "Searches the Vivatech conference database for sessions and "
            "partners related to a query."
        ),
        parameters={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The search term to find relevant Vivatech sessions or partners",
                }
            },
            "required": ["query"],
        },
    )


def format_reference_date(reference_date: date) -> str:
    """Format a date as e.g. 'June 11, 2025'."""
    return f"{reference_date.strftime('%B')} {reference_date.day}, {reference_date.year}"


def timeliness_tool_definition(reference_date: Optional[date] = None) -> ToolDefinition:
    """
    Build the timeliness tool definition.

    Args:
        reference_date: Date named in the description as "the current date"
    """
    current = (
        f" ({format_reference_date(reference_date)})" if reference_date is not None else ""
    )
    return ToolDefinition(
        name=TIMELINESS_TOOL_NAME,
        description=(
            "Analyzes a list of Vivatech events to determine their urgency "
            f"based on the current date{current}. Use this to prioritize actions."
        ),
        parameters={
            "type": "object",
            "properties": {
                "events": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "id": {
                                "type": "string",
                                "description": "Unique identifier of the event",
                            },
                            "text_chunk": {
                                "type": "string",
                                "description": "Text content describing the event",
                            },
                            "source_table": {
                                "type": "string",
                                "description": "Type of source (e.g., sessions, partners)",
                            },
                            "score": {
                                "type": "number",
                                "description": "Relevance score",
                            },
                        },
                        "required": ["id", "text_chunk"],
                    },
                    "description": "List of events to assess for timeliness",
                }
            },
            "required": ["events"],
        },
    )
