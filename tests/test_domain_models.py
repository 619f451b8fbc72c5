"""
Tests for domain models.
"""

import pytest

from freeslots.domain.models import (
    BusyInterval,
    ClockValue,
    FreeInterval,
    ParticipantCalendar,
    earlier_of,
    later_of,
)


class TestClockValue:
    """Tests for ClockValue."""

    def test_later_of(self):
        """Test the later of two values is returned."""
        t1 = ClockValue(10, 30)
        t2 = ClockValue(10, 40)

        assert later_of(t2, t1) == ClockValue(10, 40)
        assert later_of(t1, t2) == ClockValue(10, 40)

    def test_earlier_of(self):
        """Test the earlier of two values is returned."""
        t1 = ClockValue(10, 30)
        t2 = ClockValue(10, 40)

        assert earlier_of(t2, t1) == ClockValue(10, 30)
        assert earlier_of(t1, t2) == ClockValue(10, 30)

    def test_earlier_and_later_of_equal_values(self):
        """Test ties return an equal value."""
        t1 = ClockValue(12, 0)
        t2 = ClockValue(12, 0)

        assert earlier_of(t1, t2) == t1
        assert later_of(t1, t2) == t1

    def test_duration_is_commutative(self):
        """Test duration never goes negative."""
        t1 = ClockValue(10, 30)
        t2 = ClockValue(10, 40)

        assert t1.duration_to(t2) == 10
        assert t2.duration_to(t1) == 10
        assert t1.duration_to(t1) == 0

    def test_duration_across_hours(self):
        assert ClockValue(9, 45).duration_to(ClockValue(11, 15)) == 90

    def test_comparisons(self):
        """Test ordering by hour, then minute."""
        early = ClockValue(9, 59)
        late = ClockValue(10, 0)

        assert early.less_than(late)
        assert not late.less_than(early)
        assert not early.less_than(early)
        assert late.at_least(early)
        assert late.at_least(late)
        assert not early.at_least(late)
        assert early.equals(ClockValue(9, 59))
        assert not early.equals(late)

    def test_out_of_range_values_are_accepted(self):
        """Test values outside a normal day are compared without wrapping."""
        late = ClockValue(25, 0)

        assert late.total_minutes() == 1500
        assert ClockValue(23, 0).less_than(late)
        assert ClockValue(23, 0).duration_to(late) == 120

    def test_parse(self):
        assert ClockValue.parse("9:05") == ClockValue(9, 5)
        assert ClockValue.parse(" 17:30 ") == ClockValue(17, 30)

    def test_parse_does_not_check_range(self):
        assert ClockValue.parse("26:75") == ClockValue(26, 75)

    def test_parse_invalid_text_raises_error(self):
        """Test that malformed text raises ValueError."""
        with pytest.raises(ValueError, match="Invalid clock value"):
            ClockValue.parse("nine")

    def test_str(self):
        assert str(ClockValue(9, 0)) == "09:00"
        assert str(ClockValue(17, 25)) == "17:25"


class TestIntervals:
    """Tests for busy and free intervals."""

    def test_structural_equality(self):
        first = BusyInterval(ClockValue(9, 0), ClockValue(10, 0))
        second = BusyInterval(ClockValue(9, 0), ClockValue(10, 0))
        other = BusyInterval(ClockValue(9, 0), ClockValue(10, 30))

        assert first == second
        assert first != other

    def test_free_and_busy_are_distinct_types(self):
        busy = BusyInterval(ClockValue(9, 0), ClockValue(10, 0))
        free = FreeInterval(ClockValue(9, 0), ClockValue(10, 0))

        assert busy != free

    def test_duration_and_str(self):
        interval = FreeInterval(ClockValue(11, 30), ClockValue(12, 0))

        assert interval.duration_minutes() == 30
        assert str(interval) == "11:30 - 12:00"


class TestParticipantCalendar:
    """Tests for ParticipantCalendar."""

    def test_busy_intervals_are_stored_as_tuple(self):
        """Test the calendar keeps its own immutable copy of the intervals."""
        busy = [BusyInterval(ClockValue(9, 0), ClockValue(10, 0))]
        calendar = ParticipantCalendar(busy, ClockValue(8, 0), ClockValue(17, 0))

        busy.append(BusyInterval(ClockValue(11, 0), ClockValue(12, 0)))

        assert isinstance(calendar.busy_intervals, tuple)
        assert len(calendar.busy_intervals) == 1

    def test_calendar_is_frozen(self):
        calendar = ParticipantCalendar([], ClockValue(8, 0), ClockValue(17, 0))

        with pytest.raises(AttributeError):
            calendar.day_start = ClockValue(9, 0)

    def test_unsorted_intervals_are_not_rejected(self):
        """Test construction does not validate the busy intervals."""
        busy = [
            BusyInterval(ClockValue(12, 0), ClockValue(13, 0)),
            BusyInterval(ClockValue(9, 0), ClockValue(12, 30)),
        ]

        calendar = ParticipantCalendar(busy, ClockValue(8, 0), ClockValue(17, 0))

        assert calendar.busy_intervals[0].start == ClockValue(12, 0)

    def test_working_day(self):
        calendar = ParticipantCalendar([], ClockValue(8, 0), ClockValue(17, 25))

        assert calendar.working_day().duration_minutes() == 565
