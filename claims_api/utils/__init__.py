"""
Utilities module for the claims service.
Contains common parsing, sorting and logging helpers.
"""

from .logger import get_logger
from .date_utils import format_date, is_within_range, parse_date
from .validation_utils import is_blank, parse_integer, parse_positive_integer

__all__ = [
    "get_logger",
    "format_date",
    "is_within_range",
    "parse_date",
    "is_blank",
    "parse_integer",
    "parse_positive_integer",
]
