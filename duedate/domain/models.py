"""
Domain models for the working calendar and submission requests.
"""

from dataclasses import dataclass
from datetime import datetime, time
from typing import ClassVar, Tuple

import pendulum
from pendulum import DateTime


def as_wall_clock(value: datetime) -> DateTime:
    """
    Convert any datetime into a naive pendulum DateTime.

    Timezone information is dropped on purpose: the calendar works on
    wall-clock values only, so adding days or hours never crosses an offset.
    """
    return pendulum.naive(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


@dataclass(frozen=True)
class WorkingCalendar:
    """
    Immutable working calendar: Monday to Friday with a fixed daily window.

    Invariant: start_time must be before end_time, both on the full hour.
    """
    start_time: time = time(9, 0)
    end_time: time = time(17, 0)

    WORKING_DAYS: ClassVar[Tuple[int, ...]] = (
        pendulum.MONDAY,
        pendulum.TUESDAY,
        pendulum.WEDNESDAY,
        pendulum.THURSDAY,
        pendulum.FRIDAY,
    )

    def __post_init__(self):
        if self.start_time >= self.end_time:
            raise ValueError(
                f"Start of work {self.start_time} must be before end of work {self.end_time}"
            )
        for boundary in (self.start_time, self.end_time):
            if boundary.minute or boundary.second or boundary.microsecond:
                raise ValueError(f"Working hours must be on the full hour, got {boundary}")

    @property
    def start_hour(self) -> int:
        return self.start_time.hour

    @property
    def end_hour(self) -> int:
        return self.end_time.hour

    @property
    def hours_per_day(self) -> int:
        """Working hours in a single working day."""
        return self.end_hour - self.start_hour

    @property
    def hours_per_week(self) -> int:
        """Working hours in a full working week."""
        return len(self.WORKING_DAYS) * self.hours_per_day

    def is_working_day(self, dt: DateTime) -> bool:
        """Check if a given datetime falls on a working day."""
        return dt.day_of_week in self.WORKING_DAYS

    def start_of_work(self, dt: DateTime) -> DateTime:
        """Start of the working window on the day of ``dt``."""
        return dt.set(hour=self.start_hour, minute=0, second=0, microsecond=0)

    def end_of_work(self, dt: DateTime) -> DateTime:
        """End of the working window on the day of ``dt``."""
        return dt.set(hour=self.end_hour, minute=0, second=0, microsecond=0)

    def is_before_start(self, dt: DateTime) -> bool:
        return dt < self.start_of_work(dt)

    def is_after_end(self, dt: DateTime) -> bool:
        return dt > self.end_of_work(dt)

    def is_working_time(self, dt: DateTime) -> bool:
        """Check if ``dt`` lies inside a working window, both boundaries included."""
        return (
            self.is_working_day(dt)
            and not self.is_before_start(dt)
            and not self.is_after_end(dt)
        )

    def hours_past_start(self, dt: DateTime) -> int:
        """Whole working hours elapsed today; minutes are not counted."""
        return dt.hour - self.start_hour

    def hours_past_week_start(self, dt: DateTime) -> int:
        """Whole working hours elapsed since Monday's start of work."""
        return int(dt.day_of_week) * self.hours_per_day + self.hours_past_start(dt)


DEFAULT_CALENDAR = WorkingCalendar()


@dataclass(frozen=True)
class SubmissionRequest:
    """
    An issue submission: when it was reported and how many working hours
    it may take to resolve.
    """
    submit_time: datetime | None
    turnover_hours: int

    def __str__(self) -> str:
        submitted = self.submit_time.strftime("%Y-%m-%d %H:%M") if self.submit_time else "?"
        return f"{submitted} +{self.turnover_hours}h"
