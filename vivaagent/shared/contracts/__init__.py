"""Conference data contracts shared by the search client and the tools."""

from vivaagent.shared.contracts.conference import (
    ConferenceSource,
    SearchMetadata,
    SearchResponse,
    TimelinessAssessment,
    UrgencyLevel,
)

__all__ = [
    "ConferenceSource",
    "SearchMetadata",
    "SearchResponse",
    "TimelinessAssessment",
    "UrgencyLevel",
]
