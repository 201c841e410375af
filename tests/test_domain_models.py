"""
Tests for domain models.
"""

import pendulum
import pytest
from datetime import datetime, time

from duedate.domain.models import DEFAULT_CALENDAR, SubmissionRequest, WorkingCalendar, as_wall_clock


class TestWorkingCalendar:
    """Tests for WorkingCalendar model."""

    def test_default_calendar(self):
        """Test the standard 9-17 calendar constants."""
        assert DEFAULT_CALENDAR.start_hour == 9
        assert DEFAULT_CALENDAR.end_hour == 17
        assert DEFAULT_CALENDAR.hours_per_day == 8
        assert DEFAULT_CALENDAR.hours_per_week == 40

    def test_invalid_order_raises_error(self):
        """Test that a day closing before it opens is rejected."""
        with pytest.raises(ValueError, match="must be before end of work"):
            WorkingCalendar(start_time=time(17, 0), end_time=time(9, 0))

    def test_partial_hour_raises_error(self):
        """Test that working hours must be on the full hour."""
        with pytest.raises(ValueError, match="full hour"):
            WorkingCalendar(start_time=time(9, 30), end_time=time(17, 0))

    def test_calendar_is_immutable(self):
        """Test that calendar values cannot be reassigned."""
        with pytest.raises(AttributeError):
            DEFAULT_CALENDAR.start_time = time(8, 0)

    def test_is_working_day(self):
        """Test working day detection."""
        assert DEFAULT_CALENDAR.is_working_day(pendulum.naive(2020, 1, 27))  # Monday
        assert DEFAULT_CALENDAR.is_working_day(pendulum.naive(2020, 1, 31))  # Friday
        assert not DEFAULT_CALENDAR.is_working_day(pendulum.naive(2020, 2, 1))  # Saturday
        assert not DEFAULT_CALENDAR.is_working_day(pendulum.naive(2020, 2, 2))  # Sunday

    def test_working_time_boundaries(self):
        """Test that both ends of the working window count as working time."""
        assert DEFAULT_CALENDAR.is_working_time(pendulum.naive(2020, 1, 27, 9, 0))
        assert DEFAULT_CALENDAR.is_working_time(pendulum.naive(2020, 1, 27, 17, 0))
        assert not DEFAULT_CALENDAR.is_working_time(pendulum.naive(2020, 1, 27, 8, 59))
        assert not DEFAULT_CALENDAR.is_working_time(pendulum.naive(2020, 1, 27, 17, 0, 1))

    def test_hours_past_week_start(self):
        """Test elapsed working hours counting only whole hours."""
        assert DEFAULT_CALENDAR.hours_past_week_start(pendulum.naive(2020, 1, 27, 9, 0)) == 0
        assert DEFAULT_CALENDAR.hours_past_week_start(pendulum.naive(2020, 1, 30, 10, 5)) == 25
        assert DEFAULT_CALENDAR.hours_past_week_start(pendulum.naive(2020, 1, 31, 16, 5)) == 39

    def test_start_of_work_clears_minutes(self):
        """Test start of work is the exact full hour on the same day."""
        start = DEFAULT_CALENDAR.start_of_work(pendulum.naive(2020, 1, 27, 7, 15, 42))

        assert start == pendulum.naive(2020, 1, 27, 9, 0)


class TestAsWallClock:
    """Tests for timestamp conversion."""

    def test_stdlib_datetime(self):
        """Test a plain datetime keeps its wall-clock fields."""
        result = as_wall_clock(datetime(2020, 1, 31, 10, 5, 30))

        assert result == pendulum.naive(2020, 1, 31, 10, 5, 30)
        assert result.tzinfo is None

    def test_aware_datetime_drops_timezone(self):
        """Test an aware datetime is reduced to its local wall-clock time."""
        result = as_wall_clock(pendulum.datetime(2020, 3, 29, 10, 0, tz="Europe/Berlin"))

        assert result == pendulum.naive(2020, 3, 29, 10, 0)
        assert result.tzinfo is None


class TestSubmissionRequest:
    """Tests for SubmissionRequest model."""

    def test_str(self):
        """Test the readable form used in log messages."""
        request = SubmissionRequest(submit_time=pendulum.naive(2020, 1, 31, 10, 5), turnover_hours=3)

        assert str(request) == "2020-01-31 10:05 +3h"
