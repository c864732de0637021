"""
Planning agent graph.

Runs the tool-calling loop behind /generate-plan:
    objective -> agent -> (tools -> agent)* -> complete
"""

from vivaagent.graph.build import create_planning_graph, create_initial_state

__all__ = ["create_planning_graph", "create_initial_state"]
