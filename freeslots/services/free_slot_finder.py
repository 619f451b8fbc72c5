"""
Application services for finding shared free time.

The service loads both calendars via a calendar source adapter and delegates
the actual gap calculation to the domain-level ``FreeIntervalCalculator``.
This keeps the CLI thin and lets tests swap in a stub source.
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Tuple

from ..domain.free_interval_calculator import FreeIntervalCalculator
from ..domain.models import FreeInterval, ParticipantCalendar
from ..domain.validation import validate_calendar

logger = logging.getLogger(__name__)


class CalendarSourceProtocol(Protocol):
    """Protocol describing the calendar source behaviour needed by the service."""

    def load_calendar(self, participant: str) -> ParticipantCalendar:
        """Return the calendar of one participant."""


class FreeSlotFinderService:
    """
    Orchestrates calendar loading, optional validation and gap calculation.
    """

    def __init__(
        self,
        calendar_source: CalendarSourceProtocol,
        calculator: FreeIntervalCalculator | None = None,
        strict: bool = False,
    ) -> None:
        self._calendar_source = calendar_source
        self._calculator = calculator or FreeIntervalCalculator()
        self._strict = strict

    def load_calendars(
        self,
        participant_a: str,
        participant_b: str,
    ) -> Tuple[ParticipantCalendar, ParticipantCalendar]:
        """
        Load both calendars, validating them first in strict mode.

        Raises:
            ClockValueError: In strict mode, if a clock value is out of range
            CalendarValidationError: In strict mode, if busy intervals are
                unsorted or overlap
        """
        logger.info("Loading calendars for %s and %s", participant_a, participant_b)

        calendar_a = self._calendar_source.load_calendar(participant_a)
        calendar_b = self._calendar_source.load_calendar(participant_b)

        if self._strict:
            validate_calendar(calendar_a, name=participant_a)
            validate_calendar(calendar_b, name=participant_b)

        return calendar_a, calendar_b

    def find_free_intervals(
        self,
        *,
        participant_a: str,
        participant_b: str,
        minimum_free_minutes: int,
    ) -> List[FreeInterval]:
        """Load both calendars and compute their shared free intervals."""
        calendar_a, calendar_b = self.load_calendars(participant_a, participant_b)

        return self.calculate(calendar_a, calendar_b, minimum_free_minutes)

    def calculate(
        self,
        calendar_a: ParticipantCalendar,
        calendar_b: ParticipantCalendar,
        minimum_free_minutes: int,
    ) -> List[FreeInterval]:
        """Calculate shared free intervals from already loaded calendars."""
        logger.info("Searching free time (minimum %d min)", minimum_free_minutes)

        free_intervals = self._calculator.find_free_intervals(
            calendar_a,
            calendar_b,
            minimum_free_minutes,
        )

        logger.debug(
            "%d + %d busy interval(s) -> %d free interval(s)",
            len(calendar_a.busy_intervals),
            len(calendar_b.busy_intervals),
            len(free_intervals),
        )

        return free_intervals

