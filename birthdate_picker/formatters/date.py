"""Date and time formatting utilities."""

from datetime import date, datetime, time
from typing import Any

from dateutil import tz
from dateutil.parser import isoparse

from birthdate_picker.exceptions import InvalidDateError


def format_date(value: Any) -> str:
    """
    Format a date object to YYYY-MM-DD string.

    Args:
        value: Date object (date, datetime or string)

    Returns:
        Formatted date string
    """
    if hasattr(value, "strftime"):
        return value.strftime("%Y-%m-%d")
    return str(value)


def format_rfc3339(value: Any) -> str:
    """
    Format a date as an RFC 3339 timestamp for posting back to a server.

    Naive values are taken to be local time and plain dates are rendered at
    local midnight. A zero UTC offset is written as "Z".

    Args:
        value: date or datetime

    Returns:
        Timestamp such as "2008-03-30T14:22:05+02:00"
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz.tzlocal())

    formatted = value.replace(microsecond=0).isoformat()
    if formatted.endswith("+00:00"):
        formatted = formatted[:-6] + "Z"
    return formatted


def parse_date(text: str) -> date:
    """
    Parse an ISO 8601 date or timestamp into a calendar day.

    Args:
        text: Input such as "2008-03-30" or "2008-03-30T10:00:00+02:00"

    Returns:
        The calendar day

    Raises:
        InvalidDateError: If the text is not ISO 8601
    """
    try:
        return isoparse(text.strip()).date()
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(text, str(e)) from e
