"""
Date extraction from free text.

Recognizes exactly two surface patterns and resolves them to a date in
the conference year:
- "June 12" (month name, then day)
- "12th June" (day with optional ordinal suffix, then month name)

The month word must be capitalized as in running text. Other date
formats are not recognized.
"""

import re
from datetime import date
from typing import Optional

from vivaagent.shared.config.settings import CONFERENCE_YEAR


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_ALTERNATION = "|".join(MONTH_NAMES)

MONTH_DAY_PATTERN = re.compile(rf"({_MONTH_ALTERNATION})\s+([0-9]{{1,2}})")
DAY_MONTH_PATTERN = re.compile(rf"([0-9]{{1,2}})(?:st|nd|rd|th)?\s+({_MONTH_ALTERNATION})")

_MONTH_NUMBERS = {name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)}


def month_name_to_number(month: str) -> Optional[int]:
    """
    Convert an English month name to its number (case-insensitive).

    Returns:
        1-12, or None for anything that is not a month name
    """
    return _MONTH_NUMBERS.get(month.lower())


def _build_date(year: int, month_str: str, day_str: str) -> Optional[date]:
    month = month_name_to_number(month_str)
    if month is None:
        return None
    try:
        return date(year, month, int(day_str))
    except ValueError:
        # day 0, June 31, Feb 29 outside leap years
        return None


def extract_date_from_text(text: str, year: int = CONFERENCE_YEAR) -> Optional[date]:
    """
    Find the first date mention in text and resolve it within `year`.

    The "June 12" form is tried first; if it is absent or does not form a
    valid date, the "12th June" form is tried. Only the first match of
    each pattern is considered.

    Args:
        text: Arbitrary text (e.g., a session description)
        year: Year to resolve the date in (default: the conference year)

    Returns:
        The resolved date, or None if no valid date was found
    """
    match = MONTH_DAY_PATTERN.search(text)
    if match:
        resolved = _build_date(year, match.group(1), match.group(2))
        if resolved is not None:
            return resolved

    match = DAY_MONTH_PATTERN.search(text)
    if match:
        resolved = _build_date(year, match.group(2), match.group(1))
        if resolved is not None:
            return resolved

    return None
