"""
Vivatech search API client.

Async HTTP client for the conference search endpoint. One request per
call, with a hard timeout and no retries. Each failure mode surfaces as
its own exception class from vivaagent.shared.errors.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from vivaagent.shared.config.settings import AppSettings
from vivaagent.shared.contracts.conference import ConferenceSource, SearchResponse
from vivaagent.shared.errors import (
    ConfigurationError,
    DeserializationError,
    SearchStatusError,
    TransportError,
)


logger = logging.getLogger(__name__)


class ConferenceSearchClient:
    """
    Client for the Vivatech search API.

    Example:
        >>> client = ConferenceSearchClient.from_settings(settings)
        >>> sources = await client.search("AI startups keynote")
        >>> print(sources[0].text_chunk)
    """

    def __init__(
        self,
        api_url: Optional[str],
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the search client.

        Args:
            api_url: Search endpoint URL (requests fail if not set)
            timeout_seconds: Request timeout in seconds (default: 30)
            transport: Optional httpx transport (used to stub the API in tests)
        """
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ConferenceSearchClient":
        return cls(
            api_url=settings.search_api_url,
            timeout_seconds=float(settings.api_timeout_seconds),
            transport=transport,
        )

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": "VivaAgent/1.0 (ConferenceSearchClient)",
        }

    async def search(self, query: str) -> List[ConferenceSource]:
        """
        Search the conference database.

        Args:
            query: Free-text search term

        Returns:
            Sources in the order returned by the API

        Raises:
            ConfigurationError: If the API URL is not configured
            TransportError: On network failure or timeout
            SearchStatusError: If the API returns a non-success status
            DeserializationError: If the body does not match the contract
        """
        if not self.api_url:
            raise ConfigurationError("VIVATECH_API_URL not found in environment")

        request_body = {"query": query}
        logger.info(f"Querying Vivatech API | query='{query}', timeout={self.timeout_seconds}s")

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_seconds),
            transport=self._transport,
        ) as client:
            try:
                # post() reads the whole body, so this bounds the full exchange
                response = await asyncio.wait_for(
                    client.post(
                        self.api_url,
                        json=request_body,
                        headers=self._build_headers(),
                    ),
                    timeout=self.timeout_seconds,
                )
            except (httpx.TimeoutException, asyncio.TimeoutError) as e:
                logger.error(f"Vivatech API timed out after {self.timeout_seconds}s: {e}")
                raise TransportError(
                    f"HTTP request timed out after {self.timeout_seconds}s: {e}"
                ) from e
            except httpx.HTTPError as e:
                logger.error(f"Vivatech API request failed: {e}")
                raise TransportError(f"HTTP request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Vivatech API error: {response.status_code}")
            raise SearchStatusError(response.status_code)

        api_response = self._parse_response(response)

        logger.info(
            f"Vivatech API returned {len(api_response.sources)} sources | "
            f"search_mode={api_response.metadata.search_mode}"
        )
        return api_response.sources

    def _parse_response(self, response: httpx.Response) -> SearchResponse:
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise DeserializationError(f"Failed to parse JSON response: {e}") from e

        try:
            return SearchResponse.model_validate(payload)
        except ValidationError as e:
            raise DeserializationError(f"Failed to parse JSON response: {e}") from e
