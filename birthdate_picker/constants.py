"""Shared constants for birthdate-picker."""

from dataclasses import dataclass
from typing import List


# Shortest possible month; fewer days than this can never hold a whole month
MIN_DAYS_IN_MONTH = 28
MONTHS_IN_YEAR = 12

# Allowed age range for a birthdate
MIN_YEARS = 18
MAX_YEARS = 130


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Unified column definitions for both CLI and TUI
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("date", "Date", 12),
    ColumnDefinition("label", "Age", 30),
    ColumnDefinition("value", "Value", 27),
]


ORDER_CHOICES = ["desc", "asc"]
OUTPUT_CHOICES = ["table", "json"]
