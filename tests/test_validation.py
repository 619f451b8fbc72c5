"""
Tests for the opt-in calendar validation layer.
"""

import pytest

from freeslots.domain.exceptions import CalendarValidationError, ClockValueError
from freeslots.domain.free_interval_calculator import compute_free_intervals
from freeslots.domain.models import BusyInterval, ClockValue, ParticipantCalendar
from freeslots.domain.validation import (
    find_calendar_violations,
    validate_calendar,
    validate_clock_value,
)


def _interval(start: str, stop: str) -> BusyInterval:
    return BusyInterval(ClockValue.parse(start), ClockValue.parse(stop))


class TestValidateClockValue:
    """Tests for validate_clock_value."""

    def test_valid_values(self):
        assert validate_clock_value(ClockValue(0, 0)) == ClockValue(0, 0)
        assert validate_clock_value(ClockValue(23, 59)) == ClockValue(23, 59)
        assert validate_clock_value(ClockValue(24, 0)) == ClockValue(24, 0)

    @pytest.mark.parametrize(
        "value",
        [ClockValue(25, 0), ClockValue(-1, 0), ClockValue(24, 30)],
    )
    def test_invalid_hour(self, value):
        with pytest.raises(ClockValueError, match="Hour"):
            validate_clock_value(value)

    def test_invalid_minute(self):
        with pytest.raises(ClockValueError, match="Minute"):
            validate_clock_value(ClockValue(10, 60))


class TestCalendarValidation:
    """Tests for calendar precondition checks."""

    def test_sorted_touching_calendar_is_valid(self):
        calendar = ParticipantCalendar(
            [_interval("10:30", "11:00"), _interval("11:00", "12:00")],
            ClockValue(9, 0),
            ClockValue(17, 0),
        )

        assert find_calendar_violations(calendar) == []
        assert validate_calendar(calendar) is calendar

    def test_overlap_is_reported(self):
        calendar = ParticipantCalendar(
            [_interval("10:30", "11:00"), _interval("10:45", "12:00")],
            ClockValue(9, 0),
            ClockValue(17, 0),
        )

        violations = find_calendar_violations(calendar)

        assert len(violations) == 1
        assert "overlaps" in violations[0]

    def test_unsorted_and_reversed_are_reported(self):
        calendar = ParticipantCalendar(
            [_interval("12:00", "11:00"), _interval("9:00", "10:00")],
            ClockValue(9, 0),
            ClockValue(17, 0),
        )

        violations = find_calendar_violations(calendar)

        assert any("stops before it starts" in v for v in violations)
        assert any("starts before" in v for v in violations)

    def test_validate_calendar_raises_with_name(self):
        calendar = ParticipantCalendar(
            [_interval("9:00", "12:30"), _interval("12:00", "13:00")],
            ClockValue(7, 30),
            ClockValue(16, 30),
        )

        with pytest.raises(CalendarValidationError, match="alice") as exc_info:
            validate_calendar(calendar, name="alice")

        assert exc_info.value.calendar_name == "alice"
        assert len(exc_info.value.violations) == 1

    def test_validate_calendar_checks_clock_ranges(self):
        calendar = ParticipantCalendar([], ClockValue(9, 0), ClockValue(30, 0))

        with pytest.raises(ClockValueError):
            validate_calendar(calendar)

    def test_validation_does_not_change_results(self):
        """Test a valid calendar gives the same result validated or not."""
        first = ParticipantCalendar([_interval("10:00", "11:00")], ClockValue(9, 0), ClockValue(12, 0))
        second = ParticipantCalendar([], ClockValue(9, 0), ClockValue(12, 0))

        expected = compute_free_intervals(first, second, 30)

        assert compute_free_intervals(validate_calendar(first), validate_calendar(second), 30) == expected
