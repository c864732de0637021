"""
Urgency classification.

Maps the number of days between an event and the reference date to an
urgency bucket and a human-readable description.
"""

from datetime import date
from typing import Iterable, List, Optional, Tuple

from vivaagent.shared.contracts.conference import (
    ConferenceSource,
    TimelinessAssessment,
    UrgencyLevel,
)
from vivaagent.timeliness.dates import extract_date_from_text


NO_DATE_DESCRIPTION = "No specific date found - treating as normal priority."
TODAY_DESCRIPTION = "This event is happening TODAY - immediate action required!"
TOMORROW_DESCRIPTION = "This event is happening TOMORROW - plan accordingly."
PASSED_DESCRIPTION = "This event has already passed."


def classify_urgency(
    event_date: Optional[date], reference_date: date
) -> Tuple[UrgencyLevel, str]:
    """
    Classify an event date against the reference date.

    Args:
        event_date: Resolved event date, or None if no date was found
        reference_date: The date treated as "today"

    Returns:
        Tuple of (urgency level, description)
    """
    if event_date is None:
        return UrgencyLevel.NORMAL, NO_DATE_DESCRIPTION

    days_until_event = (event_date - reference_date).days

    if days_until_event == 0:
        return UrgencyLevel.IMMEDIATE, TODAY_DESCRIPTION
    if days_until_event == 1:
        return UrgencyLevel.SOON, TOMORROW_DESCRIPTION
    if days_until_event > 1:
        return (
            UrgencyLevel.NORMAL,
            f"This event is in {days_until_event} days - normal priority.",
        )
    return UrgencyLevel.NORMAL, PASSED_DESCRIPTION


def analyze_event_urgency(text: str, reference_date: date) -> Tuple[UrgencyLevel, str]:
    """Extract a date from text and classify it."""
    return classify_urgency(extract_date_from_text(text), reference_date)


def assess_events(
    events: Iterable[ConferenceSource], reference_date: date
) -> List[TimelinessAssessment]:
    """
    Assess every event, one result per input in input order.

    Args:
        events: Sources to assess
        reference_date: The date treated as "today"

    Returns:
        List of TimelinessAssessment matching the input ids and order
    """
    results = []
    for event in events:
        urgency, description = analyze_event_urgency(event.text_chunk, reference_date)
        results.append(
            TimelinessAssessment(
                source_id=event.id,
                urgency=urgency,
                description=description,
            )
        )
    return results
