"""
Domain models for clock values, intervals and participant calendars.
"""

import re
from dataclasses import dataclass
from typing import Tuple

_CLOCK_PATTERN = re.compile(r"^\s*(\d+):(\d+)\s*$")


@dataclass(frozen=True)
class ClockValue:
    """
    A time of day stored as hour and minute.

    Values are not range-checked: ``ClockValue(25, 90)`` is accepted and
    compared arithmetically, without wrapping around midnight.
    """
    hour: int
    minute: int

    @classmethod
    def parse(cls, text: str) -> "ClockValue":
        """
        Build a clock value from ``"H:MM"`` or ``"HH:MM"`` text.

        Only the shape is checked, not the range.

        Raises:
            ValueError: If the text is not two colon-separated integers
        """
        match = _CLOCK_PATTERN.match(text)
        if not match:
            raise ValueError(f"Invalid clock value '{text}', expected HH:MM")
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    def total_minutes(self) -> int:
        """Return the value as minutes since midnight."""
        return self.hour * 60 + self.minute

    def less_than(self, other: "ClockValue") -> bool:
        if self.hour == other.hour:
            return self.minute < other.minute
        return self.hour < other.hour

    def at_least(self, other: "ClockValue") -> bool:
        if self.hour == other.hour:
            return self.minute >= other.minute
        return self.hour >= other.hour

    def equals(self, other: "ClockValue") -> bool:
        return self == other

    def duration_to(self, other: "ClockValue") -> int:
        """
        Return the number of minutes between two clock values.

        The result is never negative, whichever operand is later.
        """
        return abs(self.total_minutes() - other.total_minutes())

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def later_of(first: ClockValue, second: ClockValue) -> ClockValue:
    """
    Return the later of two clock values.

    later_of(10:30, 10:40) -> 10:40
    """
    return first if first.total_minutes() >= second.total_minutes() else second


def earlier_of(first: ClockValue, second: ClockValue) -> ClockValue:
    """
    Return the earlier of two clock values.

    earlier_of(10:30, 10:40) -> 10:30
    """
    return second if first.total_minutes() >= second.total_minutes() else first


@dataclass(frozen=True)
class Interval:
    """
    A span of time between two clock values.

    ``start <= stop`` is assumed but not enforced.
    """
    start: ClockValue
    stop: ClockValue

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return self.start.duration_to(self.stop)

    def __str__(self) -> str:
        return f"{self.start} - {self.stop}"


@dataclass(frozen=True)
class BusyInterval(Interval):
    """A span during which a participant is unavailable."""


@dataclass(frozen=True)
class FreeInterval(Interval):
    """A span during which both participants are available."""


@dataclass(frozen=True)
class ParticipantCalendar:
    """
    One participant's working day and busy intervals.

    Busy intervals are expected sorted by start time and not to overlap each
    other. This is the caller's responsibility and is not checked here; see
    ``freeslots.domain.validation`` for an opt-in check.
    """
    busy_intervals: Tuple[BusyInterval, ...]
    day_start: ClockValue
    day_end: ClockValue

    def __post_init__(self):
        # Accept any sequence but store an immutable copy
        object.__setattr__(self, "busy_intervals", tuple(self.busy_intervals))

    def working_day(self) -> Interval:
        """Return the working-day bounds as an interval."""
        return Interval(start=self.day_start, stop=self.day_end)
