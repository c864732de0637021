"""
Error taxonomy for the planner.

Failures raised by the core are returned to the immediate caller (tool
adapter or graph node) as typed exceptions. Missing dates are not errors.
"""

from typing import Optional


class VivatechError(Exception):
    """Base exception for planner errors."""
    pass


class ConfigurationError(VivatechError):
    """Raised when required configuration is missing."""
    pass


class SearchApiError(VivatechError):
    """Base exception for conference search API failures."""
    pass


class TransportError(SearchApiError):
    """Raised when the search request fails at the network level."""
    pass


class SearchStatusError(TransportError):
    """Raised when the search API answers with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"API returned error status: {status_code}")


class DeserializationError(SearchApiError):
    """Raised when the search API response does not match the contract."""
    pass


class ToolCallError(VivatechError):
    """Raised when the agent requests an unknown tool or passes bad arguments."""
    pass
