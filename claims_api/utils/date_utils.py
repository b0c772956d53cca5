"""
Date utilities for claims processing.
Parsing of uploaded service dates and inclusive range checks.
"""

from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser

# Two defaults differing in year, month and day. A value parses to the same
# date under both only when it spells out all three itself.
_PARSE_DEFAULTS = (datetime(1900, 1, 1), datetime(1904, 2, 2))


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse a value into a calendar date.

    Timezone information is dropped; the calendar date as written is kept.
    Partial values such as "5", "1000" or "2024-03" are rejected.

    Args:
        value: String (ISO or other common format), date or datetime

    Returns:
        Parsed date or None if the value is empty or not a complete valid date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    value = value.strip()
    if not value:
        return None

    try:
        parsed = {parser.parse(value, default=default, fuzzy=False).date() for default in _PARSE_DEFAULTS}
    except (ValueError, OverflowError):
        return None

    return parsed.pop() if len(parsed) == 1 else None


def format_date(value: date) -> str:
    """Format a date as an ISO string (YYYY-MM-DD)."""
    return value.isoformat()


def is_within_range(value: date,
                    start_date: Optional[date] = None,
                    end_date: Optional[date] = None) -> bool:
    """
    Check a date against inclusive bounds. A missing bound imposes no constraint.

    Args:
        value: Date to check
        start_date: Lower bound, inclusive
        end_date: Upper bound, inclusive
    """
    if start_date is not None and value < start_date:
        return False
    if end_date is not None and value > end_date:
        return False
    return True
