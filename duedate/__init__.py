"""
Due date calculation for issue tracking on a fixed working calendar.
"""

from .domain.calculator import DueDateCalculator, calculate_due_date
from .domain.exceptions import DueDateError, DueDateOutOfRangeError, InvalidArgumentError
from .domain.models import DEFAULT_CALENDAR, SubmissionRequest, WorkingCalendar

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CALENDAR",
    "DueDateCalculator",
    "DueDateError",
    "DueDateOutOfRangeError",
    "InvalidArgumentError",
    "SubmissionRequest",
    "WorkingCalendar",
    "calculate_due_date",
]
