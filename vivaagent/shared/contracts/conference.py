"""
Conference data contracts.

Defines the records returned by the Vivatech search API and the
assessments produced by the timeliness tool.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UrgencyLevel(str, Enum):
    """How soon an event happens relative to the reference date."""

    IMMEDIATE = "Immediate"
    SOON = "Soon"
    NORMAL = "Normal"


class ConferenceSource(BaseModel):
    """A ranked text snippet returned by the search API."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier of the event or partner")
    source_table: str = Field(
        default="", description="Type of source (e.g., 'sessions', 'partners')"
    )
    score: float = Field(default=0.0, description="Relevance score")
    text_chunk: str = Field(description="Text content describing the event")


class SearchMetadata(BaseModel):
    """Search metadata reported by the API (informational only)."""

    search_mode: Optional[str] = Field(default=None, description="Search mode used")
    sources_found: Optional[int] = Field(
        default=None, description="Number of sources the API found"
    )


class SearchResponse(BaseModel):
    """Full response body of the search API."""

    answer: str = Field(default="", description="Generated answer (unused)")
    sources: List[ConferenceSource] = Field(description="Ranked sources")
    metadata: SearchMetadata = Field(default_factory=SearchMetadata)


class TimelinessAssessment(BaseModel):
    """Urgency assessment for a single source."""

    source_id: str = Field(description="Id of the assessed source")
    urgency: UrgencyLevel = Field(description="Urgency bucket")
    description: str = Field(description="Human-readable explanation")
