"""Enumeration of the days in the allowed birthdate range."""

from typing import List, Optional, Tuple

from birthdate_picker.constants import MIN_YEARS, MAX_YEARS
from birthdate_picker.logging_config import get_logger
from birthdate_picker.services.calendar_service import CalendarService, D

logger = get_logger(__name__)


class RangeService:
    """Service for building the list of selectable birthdates."""

    def __init__(self, calendar: Optional[CalendarService] = None):
        self.calendar = calendar or CalendarService()

    def get_birthdate_bounds(
        self, today: D, min_years: int = MIN_YEARS, max_years: int = MAX_YEARS
    ) -> Tuple[D, D]:
        """
        Get the latest and earliest allowed birthdates.

        Args:
            today: Reference day
            min_years: Minimum age
            max_years: Maximum age

        Returns:
            Tuple of (latest, earliest) birthdate
        """
        latest = self.calendar.subtract_years(today, min_years)
        earliest = self.calendar.subtract_years(today, max_years)
        return latest, earliest

    def get_date_range(self, start: D, end: D) -> List[D]:
        """
        List every day from start back to end, newest first.

        start is included and end is not. Time of day and time zone of start
        are carried over to every entry.

        Args:
            start: Latest day
            end: Earliest day, exclusive

        Returns:
            Days in descending order; empty when start is not after end
        """
        days = []
        current = start
        while current > end:
            days.append(current)
            current = self.calendar.subtract_days(current, 1)

        logger.debug(f"Built range of {len(days)} days from {start} down to {end}")
        return days
