"""
Agent tool adapter.

Binds the search client and the timeliness engine to the tool
definitions, and dispatches tool calls requested by the agent.
"""

import json
import logging
from datetime import date
from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel, ValidationError

from vivaagent.search.client import ConferenceSearchClient
from vivaagent.shared.contracts.conference import ConferenceSource, TimelinessAssessment
from vivaagent.shared.errors import ToolCallError
from vivaagent.timeliness.urgency import assess_events
from vivaagent.tools.definitions import (
    SEARCH_TOOL_NAME,
    TIMELINESS_TOOL_NAME,
    AssessTimelinessArgs,
    QueryVivatechArgs,
    ToolDefinition,
    search_tool_definition,
    timeliness_tool_definition,
)


logger = logging.getLogger(__name__)


def serialize_tool_output(output: Sequence[BaseModel]) -> str:
    """Render a tool result as the JSON content of a tool message."""
    return json.dumps([item.model_dump(mode="json") for item in output])


class AgentToolAdapter:
    """
    Exposes the search and timeliness tools to an agent runtime.

    Holds no mutable state: the search client and reference date are
    fixed at construction, so calls are independent of each other.
    """

    def __init__(self, search_client: ConferenceSearchClient, reference_date: date):
        self.search_client = search_client
        self.reference_date = reference_date

    def definitions(self) -> List[ToolDefinition]:
        return [
            search_tool_definition(),
            timeliness_tool_definition(self.reference_date),
        ]

    async def search(self, query: str) -> List[ConferenceSource]:
        return await self.search_client.search(query)

    def assess_timeliness(self, events: Sequence[ConferenceSource]) -> List[TimelinessAssessment]:
        return assess_events(events, self.reference_date)

    async def call(
        self, name: str, arguments: Union[str, Dict[str, Any], None]
    ) -> List[BaseModel]:
        """
        Dispatch a tool call by name.

        Args:
            name: Tool name requested by the agent
            arguments: JSON-encoded or already decoded arguments

        Returns:
            List of ConferenceSource (search) or TimelinessAssessment (timeliness)

        Raises:
            ToolCallError: Unknown tool or invalid arguments
            SearchApiError / ConfigurationError: Propagated from the search client
        """
        payload = self._decode_arguments(name, arguments)

        if name == SEARCH_TOOL_NAME:
            args = self._validate(name, QueryVivatechArgs, payload)
            return await self.search(args.query)

        if name == TIMELINESS_TOOL_NAME:
            args = self._validate(name, AssessTimelinessArgs, payload)
            return self.assess_timeliness(args.events)

        raise ToolCallError(f"Unknown tool: {name}")

    @staticmethod
    def _decode_arguments(
        name: str, arguments: Union[str, Dict[str, Any], None]
    ) -> Dict[str, Any]:
        if arguments is None or arguments == "":
            return {}
        if isinstance(arguments, dict):
            return arguments
        try:
            decoded = json.loads(arguments)
        except json.JSONDecodeError as e:
            raise ToolCallError(f"Invalid JSON arguments for {name}: {e}") from e
        if not isinstance(decoded, dict):
            raise ToolCallError(f"Arguments for {name} must be a JSON object")
        return decoded

    @staticmethod
    def _validate(name: str, model: type, payload: Dict[str, Any]) -> Any:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Rejected arguments for {name}: {e}")
            raise ToolCallError(f"Invalid arguments for {name}: {e}") from e
