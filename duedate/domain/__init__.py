"""
Domain layer - Pure business logic without external dependencies.
"""

from .advancer import Progress, TurnoverAdvancer
from .calculator import DueDateCalculator, calculate_due_date
from .models import DEFAULT_CALENDAR, SubmissionRequest, WorkingCalendar
from .normalizer import WorkingTimeNormalizer

__all__ = [
    "DEFAULT_CALENDAR",
    "DueDateCalculator",
    "Progress",
    "SubmissionRequest",
    "TurnoverAdvancer",
    "WorkingCalendar",
    "WorkingTimeNormalizer",
    "calculate_due_date",
]
