"""
Domain-specific exception hierarchy for the due date calculator.
"""


class DueDateError(Exception):
    """Base class for all application-level errors."""


class InvalidArgumentError(DueDateError, ValueError):
    """Raised when a submission request is missing data or carries an invalid turnover."""


class DueDateOutOfRangeError(DueDateError):
    """Raised when a due date would fall past the largest representable date."""
