"""
Validation utilities for claims processing.
"""

import re
from typing import Optional

PATTERNS = {
    'integer': r'^[+-]?\d+$',
}


def parse_integer(value: Optional[str]) -> Optional[int]:
    """
    Parse a string holding a whole number.

    Decimal points, thousands separators and exponents are rejected, so
    "10.00" or "1,000" do not parse.

    Args:
        value: String to parse

    Returns:
        Parsed integer or None
    """
    if value is None:
        return None
    value = str(value).strip()
    if not re.match(PATTERNS['integer'], value):
        return None
    return int(value)


def parse_positive_integer(value: Optional[str]) -> Optional[int]:
    """Parse a whole number strictly greater than zero, else None."""
    number = parse_integer(value)
    if number is None or number <= 0:
        return None
    return number


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()
