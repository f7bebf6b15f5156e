"""Formatting utilities for birthdate-picker.

- distance: year/month/day breakdown between two dates
- date: date rendering and parsing at the CLI and form boundary
"""

from .distance import format_distance
from .date import format_date, format_rfc3339, parse_date

__all__ = [
    # Distance
    "format_distance",
    # Date
    "format_date",
    "format_rfc3339",
    "parse_date",
]
