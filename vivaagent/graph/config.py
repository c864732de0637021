"""
Graph configuration for the planning agent.

Centralizes the LLM and loop settings of the planning workflow.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlanningGraphConfig:
    """
    Configuration for the planning graph.

    Attributes:
        model: LLM model used by the agent
        temperature: Sampling temperature
        max_tokens: Completion token limit per LLM call
        max_tool_rounds: Maximum agent -> tools round trips per request
        recursion_limit: Maximum number of graph steps
    """

    model: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 2048
    max_tool_rounds: int = 5
    recursion_limit: int = 25


# Default configuration instance
DEFAULT_CONFIG = PlanningGraphConfig()


def get_config(
    model: Optional[str] = None,
    max_tool_rounds: Optional[int] = None,
) -> PlanningGraphConfig:
    """
    Create a configuration with optional overrides.

    Args:
        model: Override for LLM model
        max_tool_rounds: Override for the tool round limit

    Returns:
        PlanningGraphConfig with specified overrides applied
    """
    max_rounds = max_tool_rounds or DEFAULT_CONFIG.max_tool_rounds
    return PlanningGraphConfig(
        model=model or DEFAULT_CONFIG.model,
        temperature=DEFAULT_CONFIG.temperature,
        max_tokens=DEFAULT_CONFIG.max_tokens,
        max_tool_rounds=max_rounds,
        # each round is two steps (agent + tools), plus entry and completion
        recursion_limit=max(DEFAULT_CONFIG.recursion_limit, 2 * max_rounds + 4),
    )
