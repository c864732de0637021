"""
Timeliness engine.

Extracts date mentions from free text and classifies how urgent an
event is relative to the reference date.
"""

from vivaagent.timeliness.dates import extract_date_from_text, month_name_to_number
from vivaagent.timeliness.urgency import analyze_event_urgency, assess_events, classify_urgency

__all__ = [
    "extract_date_from_text",
    "month_name_to_number",
    "analyze_event_urgency",
    "assess_events",
    "classify_urgency",
]
