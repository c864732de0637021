"""
Unit tests for urgency classification.

Covers every row of the urgency table plus the end-to-end text scenarios.
"""

from datetime import date

from vivaagent.shared.contracts.conference import ConferenceSource, UrgencyLevel
from vivaagent.timeliness.urgency import (
    NO_DATE_DESCRIPTION,
    PASSED_DESCRIPTION,
    TODAY_DESCRIPTION,
    TOMORROW_DESCRIPTION,
    analyze_event_urgency,
    assess_events,
    classify_urgency,
)


REFERENCE_DATE = date(2025, 6, 11)


def _make_source(source_id: str, text: str) -> ConferenceSource:
    """Create a minimal source for testing."""
    return ConferenceSource(id=source_id, text_chunk=text)


class TestClassifyUrgency:
    """Tests for the classify_urgency function."""

    def test_same_day_is_immediate(self):
        urgency, description = classify_urgency(date(2025, 6, 11), REFERENCE_DATE)
        assert urgency == UrgencyLevel.IMMEDIATE
        assert description == TODAY_DESCRIPTION

    def test_next_day_is_soon(self):
        urgency, description = classify_urgency(date(2025, 6, 12), REFERENCE_DATE)
        assert urgency == UrgencyLevel.SOON
        assert description == TOMORROW_DESCRIPTION

    def test_later_is_normal_with_day_count(self):
        urgency, description = classify_urgency(date(2025, 6, 14), REFERENCE_DATE)
        assert urgency == UrgencyLevel.NORMAL
        assert description == "This event is in 3 days - normal priority."

    def test_two_days_is_normal(self):
        """Only a one-day gap counts as soon."""
        urgency, description = classify_urgency(date(2025, 6, 13), REFERENCE_DATE)
        assert urgency == UrgencyLevel.NORMAL
        assert "in 2 days" in description

    def test_past_is_normal_already_passed(self):
        urgency, description = classify_urgency(date(2025, 6, 10), REFERENCE_DATE)
        assert urgency == UrgencyLevel.NORMAL
        assert description == PASSED_DESCRIPTION

    def test_no_date_is_normal(self):
        urgency, description = classify_urgency(None, REFERENCE_DATE)
        assert urgency == UrgencyLevel.NORMAL
        assert description == NO_DATE_DESCRIPTION

    def test_reference_date_is_respected(self):
        """The same event changes bucket when the reference date moves."""
        event = date(2025, 6, 12)
        assert classify_urgency(event, date(2025, 6, 12))[0] == UrgencyLevel.IMMEDIATE
        assert classify_urgency(event, date(2025, 6, 13))[1] == PASSED_DESCRIPTION


class TestAnalyzeEventUrgency:
    """Scenario tests from free text."""

    def test_keynote_tomorrow(self):
        urgency, description = analyze_event_urgency(
            "The keynote is on June 12", REFERENCE_DATE
        )
        assert urgency == UrgencyLevel.SOON
        assert description == TOMORROW_DESCRIPTION

    def test_december_session(self):
        urgency, description = analyze_event_urgency("Session: December 25", REFERENCE_DATE)
        assert urgency == UrgencyLevel.NORMAL
        assert description == "This event is in 197 days - normal priority."

    def test_invalid_day_treated_as_no_date(self):
        urgency, description = analyze_event_urgency("Workshop June 31", REFERENCE_DATE)
        assert urgency == UrgencyLevel.NORMAL
        assert description == NO_DATE_DESCRIPTION

    def test_text_without_date(self):
        urgency, description = analyze_event_urgency(
            "Partner booth in Hall 1", REFERENCE_DATE
        )
        assert urgency == UrgencyLevel.NORMAL
        assert description == NO_DATE_DESCRIPTION


class TestAssessEvents:
    """Tests for the assess_events function."""

    def test_one_result_per_event_in_order(self):
        events = [
            _make_source("s3", "Pitch contest 11th June"),
            _make_source("s1", "No date here"),
            _make_source("s2", "Keynote June 12"),
        ]

        results = assess_events(events, REFERENCE_DATE)

        assert [r.source_id for r in results] == ["s3", "s1", "s2"]
        assert [r.urgency for r in results] == [
            UrgencyLevel.IMMEDIATE,
            UrgencyLevel.NORMAL,
            UrgencyLevel.SOON,
        ]

    def test_empty_input(self):
        assert assess_events([], REFERENCE_DATE) == []

    def test_duplicate_ids_are_kept(self):
        """Results mirror the input, duplicates included."""
        events = [_make_source("dup", "June 12"), _make_source("dup", "June 14")]
        results = assess_events(events, REFERENCE_DATE)
        assert len(results) == 2
        assert results[0].urgency == UrgencyLevel.SOON
        assert results[1].urgency == UrgencyLevel.NORMAL

    def test_urgency_serializes_by_value(self):
        results = assess_events([_make_source("s1", "June 11")], REFERENCE_DATE)
        dumped = results[0].model_dump(mode="json")
        assert dumped == {
            "source_id": "s1",
            "urgency": "Immediate",
            "description": TODAY_DESCRIPTION,
        }
