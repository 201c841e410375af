"""
Moves submission times that fall outside working hours to the next working instant.
"""

import logging

import pendulum
from pendulum import DateTime

from .models import WorkingCalendar

logger = logging.getLogger(__name__)


class WorkingTimeNormalizer:
    """
    Maps an arbitrary timestamp to the nearest working instant at or after it.

    Rules:
    1. Working day, before start of work -> same day, start of work
    2. Monday to Thursday, after end of work -> next day, start of work
    3. Friday after end of work, or a weekend day -> next Monday, start of work
    4. Anything else is already inside working hours and is returned unchanged

    The window boundaries themselves count as working time.
    """

    def __init__(self, calendar: WorkingCalendar):
        self.calendar = calendar

    def normalize(self, dt: DateTime) -> DateTime:
        calendar = self.calendar

        if not calendar.is_working_day(dt):
            normalized = self._next_monday(dt)
        elif calendar.is_before_start(dt):
            normalized = calendar.start_of_work(dt)
        elif calendar.is_after_end(dt):
            if dt.day_of_week == pendulum.FRIDAY:
                normalized = self._next_monday(dt)
            else:
                normalized = calendar.start_of_work(dt.add(days=1))
        else:
            return dt

        logger.debug("Moved out-of-hours submission %s to %s", dt, normalized)
        return normalized

    def _next_monday(self, dt: DateTime) -> DateTime:
        return self.calendar.start_of_work(dt.next(pendulum.MONDAY, keep_time=True))
