"""
Domain-specific exception hierarchy for the freeslots application.

The free-interval engine itself never raises; these errors belong to the
optional validation layer and to the adapters around the engine.
"""

from typing import List, Sequence


class FreeSlotsError(Exception):
    """Base class for all application-level errors."""


class ClockValueError(FreeSlotsError):
    """Raised in strict mode when a clock value lies outside a normal day."""


class CalendarValidationError(FreeSlotsError):
    """Raised when a calendar breaks the sorted, non-overlapping contract."""

    def __init__(self, calendar_name: str, violations: Sequence[str]):
        self.calendar_name = calendar_name
        self.violations: List[str] = list(violations)
        details = "; ".join(self.violations)
        super().__init__(f"Calendar '{calendar_name}' is invalid: {details}")


class UnknownParticipantError(FreeSlotsError):
    """Raised when a participant cannot be found in the calendar source."""


class CalendarSourceError(FreeSlotsError):
    """Raised when calendar data cannot be read or parsed."""
