"""Core functionality for birthdate-picker"""

from datetime import date, datetime
from typing import List, Optional, Union

from dateutil import tz

from birthdate_picker.config import Config
from birthdate_picker.exceptions import InvalidDateError
from birthdate_picker.formatters import format_distance
from birthdate_picker.logging_config import get_logger
from birthdate_picker.models.option import BirthdateOption
from birthdate_picker.services.calendar_service import CalendarService, DateLike
from birthdate_picker.services.display_service import DisplayService
from birthdate_picker.services.option_service import OptionService

logger = get_logger(__name__)


class BirthdatePicker:
    """Builds and presents the options of a birthdate selector."""

    def __init__(self, config: Union[Config, dict, None] = None, tui_mode: bool = False):
        """Initialize BirthdatePicker.

        Args:
            config: Configuration dict or Config object
            tui_mode: If True, nothing is printed to the console
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.tui_mode = tui_mode

        self.calendar = CalendarService()
        self.option_service = OptionService(self.config, self.calendar)
        self.display_service = DisplayService(verbose=self.config.verbose)

        logger.debug(f"Initialized with {self.config.to_dict()}")

    def get_today(self) -> Union[date, datetime]:
        """Reference day: the configured one, or the current local time."""
        if self.config.today is not None:
            return self.config.today
        return datetime.now(tz.tzlocal()).replace(microsecond=0)

    def get_options(self) -> List[BirthdateOption]:
        """Build the options for the configured age range."""
        return self.option_service.build_options(self.get_today())

    def describe(self, day: DateLike, today: Optional[DateLike] = None) -> str:
        """
        Label a single day with its distance to today.

        Args:
            day: Day to describe, must not be after today
            today: Reference day (defaults to get_today())

        Returns:
            Distance string

        Raises:
            InvalidDateError: If day is after today
        """
        if today is None:
            today = self.get_today()
        if self.calendar.diff_days(today, day) < 0:
            raise InvalidDateError(day, "date is in the future")
        return format_distance(day, today, self.calendar)

    def process_options(self) -> List[BirthdateOption]:
        """Build the options and print them unless running under the TUI."""
        options = self.get_options()
        if not self.tui_mode:
            self.display_service.display_options(options, self.config.output)
        return options
