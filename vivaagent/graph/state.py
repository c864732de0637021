"""
Planning state schema.

Defines the state that flows through the planning graph.
"""

from typing import TypedDict, List, Optional, Annotated
import operator


class PlanningState(TypedDict):
    """
    State schema for the planning graph.

    `messages` holds the OpenAI chat transcript (system, user, assistant
    and tool messages) and only grows.
    """

    # Request
    objective: str

    # Chat transcript
    messages: Annotated[List[dict], operator.add]

    # Tool loop tracking
    tool_rounds: int
    max_tool_rounds: int

    # Result
    plan: Optional[str]
    current_step: str
    errors: Annotated[List[str], operator.add]

    # Session tracking
    session_id: Optional[str]
