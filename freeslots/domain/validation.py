"""
Opt-in precondition checks for calendars and clock values.

The free-interval engine trusts its input. These helpers let callers reject
bad calendars up front instead of getting unspecified results.
"""

from typing import List

from .exceptions import CalendarValidationError, ClockValueError
from .models import ClockValue, ParticipantCalendar


def validate_clock_value(value: ClockValue) -> ClockValue:
    """
    Ensure a clock value lies within a normal day.

    ``24:00`` is accepted as an end-of-day marker.

    Raises:
        ClockValueError: If hour or minute is out of range
    """
    if not 0 <= value.minute <= 59:
        raise ClockValueError(f"Minute must be between 0 and 59, got {value.minute}")
    if not 0 <= value.hour <= 24 or (value.hour == 24 and value.minute != 0):
        raise ClockValueError(f"Hour must be between 0 and 23 (or exactly 24:00), got {value}")
    return value


def find_calendar_violations(calendar: ParticipantCalendar) -> List[str]:
    """
    List every way a calendar breaks the engine's input contract.

    Touching intervals (one stops exactly when the next starts) are fine.
    """
    violations: List[str] = []
    previous = None

    for index, interval in enumerate(calendar.busy_intervals):
        if interval.stop.less_than(interval.start):
            violations.append(f"interval #{index} ({interval}) stops before it starts")

        if previous is not None:
            if interval.start.less_than(previous.start):
                violations.append(
                    f"interval #{index} ({interval}) starts before interval #{index - 1} ({previous})"
                )
            elif interval.start.less_than(previous.stop):
                violations.append(
                    f"interval #{index} ({interval}) overlaps interval #{index - 1} ({previous})"
                )

        previous = interval

    return violations


def validate_calendar(calendar: ParticipantCalendar, name: str = "calendar") -> ParticipantCalendar:
    """
    Check a calendar's clock values and busy-interval ordering.

    Raises:
        ClockValueError: If any clock value is out of range
        CalendarValidationError: If busy intervals are unsorted or overlap
    """
    validate_clock_value(calendar.day_start)
    validate_clock_value(calendar.day_end)
    for interval in calendar.busy_intervals:
        validate_clock_value(interval.start)
        validate_clock_value(interval.stop)

    violations = find_calendar_violations(calendar)
    if violations:
        raise CalendarValidationError(name, violations)

    return calendar
