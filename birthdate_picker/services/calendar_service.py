"""Calendar-aware date arithmetic backed by python-dateutil."""

from datetime import date, datetime
from typing import Protocol, TypeVar, Union

from dateutil.relativedelta import relativedelta

from birthdate_picker.constants import MONTHS_IN_YEAR

DateLike = Union[date, datetime]
D = TypeVar("D", date, datetime)


class CalendarArithmetic(Protocol):
    """Date arithmetic the distance formatter depends on."""

    def diff_days(self, end: DateLike, start: DateLike) -> int: ...

    def diff_months(self, end: DateLike, start: DateLike) -> int: ...

    def diff_years(self, end: DateLike, start: DateLike) -> int: ...

    def subtract_months(self, value: D, months: int) -> D: ...

    def subtract_years(self, value: D, years: int) -> D: ...


def _as_date(value: DateLike) -> date:
    """Reduce a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


class CalendarService:
    """Day-granularity calendar arithmetic.

    Subtraction clamps to the last day of shorter months, so March 31 minus
    one month is the last day of February and February 29 minus one year is
    February 28.

    Month and year differences are counted back from ``end``: the result is
    the largest ``n`` for which ``end`` minus ``n`` units is still on or after
    ``start``. Subtracting the returned difference from ``end`` therefore never
    lands before ``start``.
    """

    def diff_days(self, end: DateLike, start: DateLike) -> int:
        """Whole calendar days from start to end (negative if end is earlier)."""
        return (_as_date(end) - _as_date(start)).days

    def diff_months(self, end: DateLike, start: DateLike) -> int:
        """Whole calendar months from start to end (negative if end is earlier)."""
        end_day, start_day = _as_date(end), _as_date(start)
        if end_day < start_day:
            return -self.diff_months(start_day, end_day)

        months = (end_day.year - start_day.year) * MONTHS_IN_YEAR + end_day.month - start_day.month
        # The calendar month count overshoots by one when the last month is not full
        if end_day - relativedelta(months=months) < start_day:
            months -= 1
        return months

    def diff_years(self, end: DateLike, start: DateLike) -> int:
        """Whole calendar years from start to end (negative if end is earlier)."""
        end_day, start_day = _as_date(end), _as_date(start)
        if end_day < start_day:
            return -self.diff_years(start_day, end_day)
        return self.diff_months(end_day, start_day) // MONTHS_IN_YEAR

    def subtract_days(self, value: D, days: int) -> D:
        return value - relativedelta(days=days)

    def subtract_months(self, value: D, months: int) -> D:
        return value - relativedelta(months=months)

    def subtract_years(self, value: D, years: int) -> D:
        return value - relativedelta(years=years)
