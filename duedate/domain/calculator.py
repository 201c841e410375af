"""
Core business logic for calculating issue due dates.

This is the heart of the application - pure domain logic without any
external dependencies (no API calls, no database, no I/O).
"""

import logging

from pendulum import DateTime

from .advancer import TurnoverAdvancer
from .exceptions import InvalidArgumentError
from .models import DEFAULT_CALENDAR, SubmissionRequest, WorkingCalendar, as_wall_clock
from .normalizer import WorkingTimeNormalizer

logger = logging.getLogger(__name__)


class DueDateCalculator:
    """
    Calculates the due date of an issue from its submission request.

    Algorithm:
    1. Reject requests without a submit time or with a non-positive turnover
    2. Move an out-of-hours submit time to the next working instant
    3. Advance that instant by the turnover, skipping nights and weekends

    The calculator holds no state besides its calendar and is safe to share
    between threads.
    """

    def __init__(self, calendar: WorkingCalendar = DEFAULT_CALENDAR):
        self.calendar = calendar
        self.normalizer = WorkingTimeNormalizer(calendar)
        self.advancer = TurnoverAdvancer(calendar)

    def calculate_due_date(self, request: SubmissionRequest | None) -> DateTime:
        """
        Calculate the due date for a submission.

        Args:
            request: Submit time and turnover in working hours

        Returns:
            Naive DateTime by which the issue has to be resolved

        Raises:
            InvalidArgumentError: If the submit time is missing or the
                turnover is not a positive whole number of hours
            DueDateOutOfRangeError: If the due date would pass 9999-12-31
        """
        self.validate(request)

        start = self.normalizer.normalize(as_wall_clock(request.submit_time))
        due = self.advancer.advance(start, request.turnover_hours)

        logger.debug(
            "Submission %s starts at %s and is due at %s",
            request,
            start,
            due,
        )
        return due

    @staticmethod
    def validate(request: SubmissionRequest | None) -> None:
        """Reject unusable requests before any date arithmetic happens."""
        if request is None or request.submit_time is None:
            raise InvalidArgumentError("Submit time information cannot be null!")

        turnover = request.turnover_hours
        if isinstance(turnover, bool) or not isinstance(turnover, int):
            raise InvalidArgumentError("Turnover must be a whole number of hours!")

        if turnover <= 0:
            raise InvalidArgumentError("Turnover cannot be negative or zero!")


_default_calculator = DueDateCalculator()


def calculate_due_date(request: SubmissionRequest | None) -> DateTime:
    """Calculate a due date on the standard Monday to Friday, 9-17 calendar."""
    return _default_calculator.calculate_due_date(request)
