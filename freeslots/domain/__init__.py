"""
Domain layer - Pure business logic without external dependencies.
"""

from .free_interval_calculator import FreeIntervalCalculator, compute_free_intervals
from .models import (
    BusyInterval,
    ClockValue,
    FreeInterval,
    Interval,
    ParticipantCalendar,
    earlier_of,
    later_of,
)

__all__ = [
    "BusyInterval",
    "ClockValue",
    "FreeInterval",
    "FreeIntervalCalculator",
    "Interval",
    "ParticipantCalendar",
    "compute_free_intervals",
    "earlier_of",
    "later_of",
]
