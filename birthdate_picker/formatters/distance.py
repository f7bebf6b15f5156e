"""Relative distance formatting between two dates."""

from typing import Optional

from birthdate_picker.constants import MIN_DAYS_IN_MONTH, MONTHS_IN_YEAR
from birthdate_picker.exceptions import InvariantViolationError
from birthdate_picker.logging_config import get_logger
from birthdate_picker.services.calendar_service import (
    CalendarArithmetic,
    CalendarService,
    DateLike,
)

logger = get_logger(__name__)

_default_calendar = CalendarService()


def format_distance(
    start: DateLike, end: DateLike, calendar: Optional[CalendarArithmetic] = None
) -> str:
    """
    Format the distance from start to end as years, months and days.

    The largest whole unit is peeled off by subtracting it from ``end`` and the
    remaining interval is formatted recursively, so each remainder is always
    smaller than the unit before it. Zero-valued units are omitted, which
    leaves a trailing space when the remainder is empty ("1 month ").

    Args:
        start: Earlier date
        end: Later date, must not be before start
        calendar: Date arithmetic to use (defaults to CalendarService)

    Returns:
        Distance string such as "3 years 2 months 5 days"

    Raises:
        InvariantViolationError: If start is after end
    """
    if calendar is None:
        calendar = _default_calendar

    days = calendar.diff_days(end, start)
    if days < 0:
        raise InvariantViolationError("days", days)

    if days == 0:
        # Blank instead of '0 days'
        return ""

    if days == 1:
        return "1 day"

    if days < MIN_DAYS_IN_MONTH:
        return f"{days} days"

    months = calendar.diff_months(end, start)
    if months < 0:
        raise InvariantViolationError("months", months)

    if months == 0:
        # 28 or more days inside a month longer than February
        return f"{days} days"

    if months < MONTHS_IN_YEAR:
        same_month_date = calendar.subtract_months(end, months)
        logger.debug(f"{start} -> {end}: {months} month(s), remainder from {same_month_date}")
        day_distance = format_distance(start, same_month_date, calendar)
        if months == 1:
            return f"1 month {day_distance}"
        return f"{months} months {day_distance}"

    years = calendar.diff_years(end, start)
    if years <= 0:
        # Twelve or more months always make at least one year
        raise InvariantViolationError("years", years)

    same_year_date = calendar.subtract_years(end, years)
    logger.debug(f"{start} -> {end}: {years} year(s), remainder from {same_year_date}")
    month_distance = format_distance(start, same_year_date, calendar)
    if years == 1:
        return f"1 year {month_distance}"

    return f"{years} years {month_distance}"
