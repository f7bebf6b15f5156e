"""Pytest fixtures for birthdate-picker tests"""
from datetime import date, datetime
from unittest.mock import Mock

import pytest
from dateutil import tz

from birthdate_picker.config import Config
from birthdate_picker.services.calendar_service import CalendarService


@pytest.fixture
def today():
    """Fixed reference day."""
    return date(2026, 10, 19)


@pytest.fixture
def utc_today():
    """Fixed reference timestamp in UTC."""
    return datetime(2026, 10, 19, 12, 0, 0, tzinfo=tz.UTC)


@pytest.fixture
def calendar():
    """Real calendar arithmetic."""
    return CalendarService()


@pytest.fixture
def mock_config(today):
    """Create a configuration dictionary with a fixed reference day."""
    return {
        'min_years': 18,
        'max_years': 130,
        'today': today,
        'order': 'desc',
        'limit': None,
        'output': 'table',
        'interactive': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def small_config(mock_config):
    """Configuration that only yields a handful of options."""
    return Config.from_dict({**mock_config, 'limit': 5})


@pytest.fixture
def mock_calendar():
    """Create a mock calendar whose differences can be forced."""
    calendar = Mock(spec=CalendarService)
    calendar.diff_days = Mock(return_value=0)
    calendar.diff_months = Mock(return_value=0)
    calendar.diff_years = Mock(return_value=0)
    calendar.subtract_months = Mock(side_effect=lambda value, n: value)
    calendar.subtract_years = Mock(side_effect=lambda value, n: value)
    return calendar
