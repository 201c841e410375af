"""
Advances a working instant by a number of working hours.

Hours are consumed greedily at the coarsest granularity first (week, then
day, then hour), so the cost does not depend on the size of the turnover.
Each stage is a pure function of a ``Progress`` value and can be exercised
on its own.
"""

from dataclasses import dataclass, replace

import pendulum
from pendulum import DateTime

from .exceptions import DueDateOutOfRangeError
from .models import WorkingCalendar


@dataclass(frozen=True)
class Progress:
    """
    Intermediate state of an advancement.

    ``base`` is the timestamp the remaining offsets are applied to.
    ``hours_past_today`` counts whole working hours already spent on
    ``base``'s day.
    """
    base: DateTime
    remaining_hours: int
    hours_past_today: int
    weeks_ahead: int = 0
    days_ahead: int = 0


class TurnoverAdvancer:
    """
    Adds working hours to a timestamp that already lies inside working hours.

    Algorithm:
    1. Week rollover: if the turnover reaches past this working week, jump to
       next Monday and carry the whole weeks that remain
    2. Day rollover: if what is left reaches past today, jump to the next day
       and carry the whole days that remain
    3. Placement: add the carried weeks and days as calendar days, then the
       leftover hours
    """

    def __init__(self, calendar: WorkingCalendar):
        self.calendar = calendar

    def advance(self, start: DateTime, turnover_hours: int) -> DateTime:
        progress = self.start(start, turnover_hours)
        progress = self.roll_over_week(progress)
        progress = self.roll_over_day(progress)
        return self.place(progress)

    def start(self, start: DateTime, turnover_hours: int) -> Progress:
        """Initial progress for a normalized start instant."""
        return Progress(
            base=start,
            remaining_hours=turnover_hours,
            hours_past_today=self.calendar.hours_past_start(start),
        )

    def roll_over_week(self, progress: Progress) -> Progress:
        """
        Carry the turnover across the end of the current working week.

        Monday's start of work keeps the minutes of ``base``, so whole-hour
        offsets added later land on the same minute as the submission.
        """
        calendar = self.calendar
        hours_past_this_week = calendar.hours_past_week_start(progress.base)
        hours_left_this_week = calendar.hours_per_week - hours_past_this_week

        if progress.remaining_hours < hours_left_this_week:
            return progress

        remaining = progress.remaining_hours - hours_left_this_week
        next_monday = progress.base.next(pendulum.MONDAY, keep_time=True)

        return replace(
            progress,
            base=next_monday.set(hour=calendar.start_hour),
            remaining_hours=remaining % calendar.hours_per_week,
            hours_past_today=0,
            weeks_ahead=remaining // calendar.hours_per_week,
        )

    def roll_over_day(self, progress: Progress) -> Progress:
        """Carry the turnover across the end of the current working day."""
        calendar = self.calendar
        hours_left_today = calendar.hours_per_day - progress.hours_past_today

        if progress.remaining_hours < hours_left_today:
            return progress

        remaining = progress.remaining_hours - hours_left_today

        return replace(
            progress,
            base=progress.base.add(days=1).set(hour=calendar.start_hour),
            remaining_hours=remaining % calendar.hours_per_day,
            hours_past_today=0,
            days_ahead=remaining // calendar.hours_per_day,
        )

    def place(self, progress: Progress) -> DateTime:
        """
        Apply the carried weeks and days, then the leftover hours.

        Raises:
            DueDateOutOfRangeError: If the result would pass 9999-12-31
        """
        days_to_add = progress.weeks_ahead * 7 + progress.days_ahead
        try:
            return progress.base.add(days=days_to_add).add(hours=progress.remaining_hours)
        except (OverflowError, ValueError) as exc:
            raise DueDateOutOfRangeError(
                f"Due date is {days_to_add} days after {progress.base} and out of range"
            ) from exc
