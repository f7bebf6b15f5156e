"""Tests for CalendarService"""

from datetime import date, datetime, timedelta

from dateutil import tz


class TestDifferences:
    """Test whole-unit differences."""

    def test_diff_days(self, calendar):
        assert calendar.diff_days(date(2021, 3, 1), date(2021, 2, 1)) == 28
        assert calendar.diff_days(date(2021, 2, 1), date(2021, 3, 1)) == -28

    def test_diff_days_ignores_time_of_day(self, calendar):
        end = datetime(2021, 1, 2, 0, 30)
        start = datetime(2021, 1, 1, 23, 30)
        assert calendar.diff_days(end, start) == 1

    def test_diff_months_full_month(self, calendar):
        assert calendar.diff_months(date(2021, 3, 31), date(2021, 1, 31)) == 2

    def test_diff_months_partial_last_month(self, calendar):
        assert calendar.diff_months(date(2021, 3, 30), date(2021, 1, 31)) == 1

    def test_diff_months_counted_back_from_end(self, calendar):
        """Test Feb 28 is not a whole month after Jan 31."""
        assert calendar.diff_months(date(2021, 2, 28), date(2021, 1, 31)) == 0

    def test_diff_months_negative(self, calendar):
        assert calendar.diff_months(date(2021, 1, 31), date(2021, 3, 31)) == -2

    def test_diff_years(self, calendar):
        assert calendar.diff_years(date(2026, 10, 19), date(2000, 6, 10)) == 26
        assert calendar.diff_years(date(2026, 6, 9), date(2000, 6, 10)) == 25

    def test_diff_years_leap_day(self, calendar):
        assert calendar.diff_years(date(2021, 2, 28), date(2020, 2, 29)) == 0
        assert calendar.diff_years(date(2021, 3, 1), date(2020, 2, 29)) == 1

    def test_diff_years_negative(self, calendar):
        assert calendar.diff_years(date(2000, 6, 10), date(2026, 10, 19)) == -26


class TestSubtraction:
    """Test calendar-aware subtraction."""

    def test_subtract_months_clamps(self, calendar):
        assert calendar.subtract_months(date(2021, 3, 31), 1) == date(2021, 2, 28)
        assert calendar.subtract_months(date(2024, 3, 31), 1) == date(2024, 2, 29)

    def test_subtract_years_from_leap_day(self, calendar):
        assert calendar.subtract_years(date(2024, 2, 29), 1) == date(2023, 2, 28)
        assert calendar.subtract_years(date(2024, 2, 29), 4) == date(2020, 2, 29)

    def test_subtract_days_keeps_time_and_zone(self, calendar):
        value = datetime(2021, 3, 1, 14, 30, tzinfo=tz.UTC)
        assert calendar.subtract_days(value, 1) == datetime(2021, 2, 28, 14, 30, tzinfo=tz.UTC)


class TestAnchorConsistency:
    """Subtracting the difference from the end never passes the start."""

    def test_month_anchor_on_or_after_start(self, calendar):
        starts = [date(2020, 1, 31), date(2020, 2, 29), date(2021, 5, 30), date(2021, 12, 31)]
        for start in starts:
            for offset in range(0, 500, 3):
                end = start + timedelta(days=offset)
                months = calendar.diff_months(end, start)
                assert calendar.subtract_months(end, months) >= start
                assert calendar.subtract_months(end, months + 1) < start

    def test_year_anchor_on_or_after_start(self, calendar):
        start = date(2004, 2, 29)
        for offset in range(0, 3000, 7):
            end = start + timedelta(days=offset)
            years = calendar.diff_years(end, start)
            assert calendar.subtract_years(end, years) >= start
            assert calendar.subtract_years(end, years + 1) < start
