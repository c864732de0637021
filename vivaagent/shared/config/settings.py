"""
Application settings.

Settings are read once at startup from the process environment (populated
from a .env file when present) and passed explicitly to the search client,
the tool adapter and the LLM model.
"""

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Optional

from dotenv import load_dotenv

from vivaagent.shared.errors import ConfigurationError


logger = logging.getLogger(__name__)


# Vivatech 2025 defaults
CONFERENCE_YEAR = 2025
DEFAULT_REFERENCE_DATE = date(CONFERENCE_YEAR, 6, 11)
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_MODEL = "gpt-4o"


@dataclass(frozen=True)
class AppSettings:
    """
    Immutable process-wide configuration.

    Attributes:
        openai_api_key: API key for the OpenAI client
        search_api_url: Endpoint of the Vivatech search API
        api_timeout_seconds: Timeout for search API requests
        reference_date: The date treated as "today" for urgency checks
        model: OpenAI model used by the planning agent
    """

    openai_api_key: Optional[str] = None
    search_api_url: Optional[str] = None
    api_timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    reference_date: date = DEFAULT_REFERENCE_DATE
    model: str = DEFAULT_MODEL


def parse_reference_date(value: Optional[str]) -> date:
    """
    Parse a YYYY-MM-DD string, falling back to the built-in default.

    Args:
        value: Raw value from the environment (may be None)

    Returns:
        The parsed date, or DEFAULT_REFERENCE_DATE if absent or invalid
    """
    if not value:
        return DEFAULT_REFERENCE_DATE
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return DEFAULT_REFERENCE_DATE


def parse_timeout_seconds(value: Optional[str]) -> int:
    """Parse a positive integer timeout, falling back to 30 seconds."""
    if not value:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = int(value.strip())
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
    return timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Build settings from the environment.

    Args:
        environ: Mapping to read from. If not provided, loads .env and
            reads os.environ.

    Returns:
        AppSettings instance
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    settings = AppSettings(
        openai_api_key=environ.get("OPENAI_API_KEY") or None,
        search_api_url=environ.get("VIVATECH_API_URL") or None,
        api_timeout_seconds=parse_timeout_seconds(environ.get("API_TIMEOUT_SECONDS")),
        reference_date=parse_reference_date(environ.get("CONFERENCE_DATE")),
        model=environ.get("OPENAI_MODEL") or DEFAULT_MODEL,
    )

    logger.info(
        f"Settings loaded | search_api_configured={settings.search_api_url is not None}, "
        f"timeout={settings.api_timeout_seconds}s, "
        f"reference_date={settings.reference_date.isoformat()}, model={settings.model}"
    )
    return settings


def validate_required_configuration(settings: AppSettings) -> None:
    """
    Check that required settings are present.

    Raises:
        ConfigurationError: If OPENAI_API_KEY or VIVATECH_API_URL is missing
    """
    if not settings.openai_api_key:
        raise ConfigurationError(
            "Missing required configuration: OPENAI_API_KEY. "
            "Please set it in the environment or .env file"
        )

    if not settings.search_api_url:
        raise ConfigurationError(
            "Missing required configuration: VIVATECH_API_URL. "
            "Please set it in the environment or .env file"
        )
