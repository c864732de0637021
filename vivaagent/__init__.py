"""
Vivatech strategic planner.

This package contains:
- shared/: Common infrastructure (config, LLM client, logging, contracts, errors)
- timeliness/: Date extraction and urgency classification
- search/: Client for the Vivatech conference search API
- tools/: Tool definitions and adapter exposed to the LLM agent
- graph/: Planning agent graph and the /generate-plan endpoint
"""

from vivaagent.graph.build import create_planning_graph

__all__ = ["create_planning_graph"]
