"""Client for the Vivatech conference search API."""

from vivaagent.search.client import ConferenceSearchClient

__all__ = ["ConferenceSearchClient"]
