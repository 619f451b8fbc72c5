"""
Core business logic for finding shared free time between two calendars.

This is the heart of the application - pure domain logic without any
external dependencies (no API calls, no files, no I/O).
"""

from typing import List, Sequence, Tuple

from .models import (
    BusyInterval,
    ClockValue,
    FreeInterval,
    Interval,
    ParticipantCalendar,
    earlier_of,
    later_of,
)


class FreeIntervalCalculator:
    """
    Calculates free intervals shared by two participants.

    Algorithm:
    1. Intersect both working days into one window
    2. Merge both busy lists by start time (two-pointer merge, O(N+M))
    3. Coalesce overlapping or touching busy intervals into unavailable blocks
    4. Emit the gaps before, between and after the blocks that are long enough

    Contract: each calendar's busy intervals must already be sorted by start
    time and must not overlap within that calendar. This is not checked; input
    breaking it gives unspecified (but never crashing) output. Use
    ``freeslots.domain.validation`` to check calendars beforehand.
    """

    def find_free_intervals(
        self,
        calendar_a: ParticipantCalendar,
        calendar_b: ParticipantCalendar,
        minimum_free_minutes: int,
    ) -> List[FreeInterval]:
        """
        Find all free intervals shared by both participants.

        Args:
            calendar_a: First participant's calendar
            calendar_b: Second participant's calendar
            minimum_free_minutes: Minimum duration for a gap to be reported

        Returns:
            Free intervals in chronological order (possibly empty)
        """
        window_start, window_end = self.working_window(calendar_a, calendar_b)

        all_busy = self._merge_by_start(
            calendar_a.busy_intervals,
            calendar_b.busy_intervals,
        )

        # Nobody has a meeting: the whole window is free
        if not all_busy:
            if (
                window_end.at_least(window_start)
                and window_start.duration_to(window_end) >= minimum_free_minutes
            ):
                return [FreeInterval(start=window_start, stop=window_end)]
            return []

        blocks = self._coalesce_blocks(all_busy)

        return self._extract_gaps(
            blocks=blocks,
            window_start=window_start,
            window_end=window_end,
            minimum_free_minutes=minimum_free_minutes,
        )

    def working_window(
        self,
        calendar_a: ParticipantCalendar,
        calendar_b: ParticipantCalendar,
    ) -> Tuple[ClockValue, ClockValue]:
        """
        Return the part of the day where both participants are working.

        A shared slot can only start after the later arrival and must end
        before the earlier departure.
        """
        window_start = later_of(calendar_a.day_start, calendar_b.day_start)
        window_end = earlier_of(calendar_a.day_end, calendar_b.day_end)
        return window_start, window_end

    def _merge_by_start(
        self,
        first: Sequence[BusyInterval],
        second: Sequence[BusyInterval],
    ) -> List[Interval]:
        """
        Merge two start-sorted busy lists into one start-sorted list.

        Intervals with identical starts are both kept.
        """
        merged: List[Interval] = []
        i = j = 0

        while i < len(first) and j < len(second):
            if first[i].start.less_than(second[j].start):
                merged.append(first[i])
                i += 1
            elif second[j].start.less_than(first[i].start):
                merged.append(second[j])
                j += 1
            else:
                merged.append(second[j])
                merged.append(first[i])
                i += 1
                j += 1

        merged.extend(first[i:])
        merged.extend(second[j:])

        return merged

    def _coalesce_blocks(self, intervals: Sequence[Interval]) -> List[Interval]:
        """
        Merge overlapping or touching intervals into unavailable blocks.

        Example: [09:00-10:30, 10:00-11:30, 11:30-12:00] -> [09:00-12:00]
        """
        blocks: List[Interval] = [intervals[0]]

        for current in intervals[1:]:
            last = blocks[-1]

            if last.stop.at_least(current.start):
                blocks[-1] = Interval(
                    start=earlier_of(last.start, current.start),
                    stop=later_of(last.stop, current.stop),
                )
            else:
                blocks.append(current)

        return blocks

    def _extract_gaps(
        self,
        blocks: Sequence[Interval],
        window_start: ClockValue,
        window_end: ClockValue,
        minimum_free_minutes: int,
    ) -> List[FreeInterval]:
        """
        Collect the gaps around the unavailable blocks.

        Three zones are checked: window start to first block, between
        consecutive blocks, and last block to window end.
        """
        free_intervals: List[FreeInterval] = []

        def add_gap(start: ClockValue, stop: ClockValue) -> None:
            # Busy time outside the shared window must not widen a gap past it
            start = later_of(start, window_start)
            stop = earlier_of(stop, window_end)
            # duration_to is absolute; the ordering check rejects empty and
            # reversed gaps
            if start.less_than(stop) and start.duration_to(stop) >= minimum_free_minutes:
                free_intervals.append(FreeInterval(start=start, stop=stop))

        add_gap(window_start, blocks[0].start)

        for previous, current in zip(blocks, blocks[1:]):
            add_gap(previous.stop, current.start)

        add_gap(blocks[-1].stop, window_end)

        return free_intervals


_default_calculator = FreeIntervalCalculator()


def compute_free_intervals(
    calendar_a: ParticipantCalendar,
    calendar_b: ParticipantCalendar,
    minimum_free_minutes: int,
) -> List[FreeInterval]:
    """Shortcut for ``FreeIntervalCalculator().find_free_intervals``."""
    return _default_calculator.find_free_intervals(
        calendar_a, calendar_b, minimum_free_minutes
    )
