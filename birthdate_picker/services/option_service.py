"""Builds labelled birthdate options for the selector"""
from typing import List, Optional

from birthdate_picker.config import Config
from birthdate_picker.formatters import format_distance, format_rfc3339
from birthdate_picker.logging_config import get_logger
from birthdate_picker.models.option import BirthdateOption
from birthdate_picker.services.calendar_service import CalendarService, DateLike
from birthdate_picker.services.range_service import RangeService

logger = get_logger(__name__)


class OptionService:
    def __init__(self, config: Config, calendar: Optional[CalendarService] = None):
        self.config = config
        self.calendar = calendar or CalendarService()
        self.range_service = RangeService(self.calendar)

    def create_option(self, day: DateLike, end_date: DateLike) -> BirthdateOption:
        """Create the option for a single day, labelled with its distance to end_date."""
        return BirthdateOption(
            date=day,
            value=format_rfc3339(day),
            label=format_distance(day, end_date, self.calendar),
        )

    def build_options(self, today: DateLike) -> List[BirthdateOption]:
        """
        Build options for every allowed birthdate relative to today.

        Honours the configured order and limit.

        Args:
            today: Reference day the labels are measured against

        Returns:
            List of BirthdateOption
        """
        latest, earliest = self.range_service.get_birthdate_bounds(
            today, self.config.min_years, self.config.max_years
        )
        days = self.range_service.get_date_range(latest, earliest)

        if self.config.order == "asc":
            days.reverse()
        if self.config.limit is not None:
            days = days[:self.config.limit]

        logger.info(f"Building {len(days)} options between {earliest} and {latest}")
        return [self.create_option(day, today) for day in days]
