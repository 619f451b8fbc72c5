"""
Calendar source that reads busy times from a JSON event export.

Expected file format (a list of events):

    [
        {"calendarId": "alice", "start": "2024-11-25T09:00:00", "end": "2024-11-25T10:30:00"},
        ...
    ]

Only the wall-clock time of each timestamp is used; no timezone conversion
takes place.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import pendulum
from pendulum import Date, DateTime

from ..config import AppConfig
from ..domain.exceptions import CalendarSourceError, UnknownParticipantError
from ..domain.models import BusyInterval, ClockValue, ParticipantCalendar, later_of

logger = logging.getLogger(__name__)

END_OF_DAY = ClockValue(24, 0)


class EventFileCalendarSource:
    """
    Loads one day of busy times per participant from an event file.

    Working-day bounds still come from the config. Events of the same
    participant that overlap are merged so the resulting calendar is sorted
    and non-overlapping.
    """

    def __init__(self, events_file: Path, config: AppConfig, day: Date):
        """
        Initialize the source.

        Args:
            events_file: Path to the JSON event export
            config: Application config, used for calendar ids and day bounds
            day: The day to extract busy times for
        """
        self.events_file = events_file
        self.config = config
        self.day = day
        self.events = self._load_events()

    def _load_events(self) -> List[Dict[str, Any]]:
        """Load the raw event list from disk."""
        if not self.events_file.exists():
            raise CalendarSourceError(f"Events file not found: {self.events_file}")

        try:
            with open(self.events_file, "r", encoding="utf-8") as f:
                events = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CalendarSourceError(f"Invalid JSON in {self.events_file}: {exc}") from exc
        except OSError as exc:
            raise CalendarSourceError(f"Could not read events file {self.events_file}: {exc}") from exc

        if not isinstance(events, list):
            raise CalendarSourceError("Events file must contain a list of events.")

        logger.debug("Loaded %d event(s) from %s", len(events), self.events_file)
        return events

    def load_calendar(self, participant: str) -> ParticipantCalendar:
        """
        Build the participant's calendar for the configured day.

        Raises:
            UnknownParticipantError: If the name is not configured
        """
        participant_config = self.config.find_participant_by_name(participant)
        if participant_config is None:
            raise UnknownParticipantError(
                f"Unknown participant: '{participant}'. Use a name from the config file."
            )

        calendar_id = participant_config.calendar_id or participant_config.name
        busy: List[BusyInterval] = []

        for event in self.events:
            if not isinstance(event, dict):
                logger.warning("Skipping malformed event entry: %r", event)
                continue

            if event.get("calendarId") != calendar_id:
                continue

            try:
                interval = self._event_to_interval(event)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping invalid event for %s: %s", calendar_id, e)
                continue

            if interval is not None:
                busy.append(interval)

        busy = self._normalize(busy)
        configured = participant_config.to_calendar(self.config.defaults)

        logger.debug(
            "Found %d busy interval(s) for %s on %s",
            len(busy),
            participant_config.name,
            self.day.isoformat(),
        )

        return ParticipantCalendar(
            busy_intervals=busy,
            day_start=configured.day_start,
            day_end=configured.day_end,
        )

    def _event_to_interval(self, event: Dict[str, Any]) -> BusyInterval | None:
        """
        Convert one event to a busy interval on ``self.day``.

        Events that start on an earlier day are clipped to midnight, events
        that end on a later day to 24:00. Returns None if the event does not
        touch the day.
        """
        event_start = self._parse_datetime(event["start"])
        event_end = self._parse_datetime(event["end"])

        if event_start.date() > self.day or event_end.date() < self.day:
            return None

        if event_start.date() == self.day:
            start = ClockValue(event_start.hour, event_start.minute)
        else:
            start = ClockValue(0, 0)

        if event_end.date() == self.day:
            stop = ClockValue(event_end.hour, event_end.minute)
        else:
            stop = END_OF_DAY

        if not start.less_than(stop):
            return None

        return BusyInterval(start=start, stop=stop)

    @staticmethod
    def _parse_datetime(value: str) -> DateTime:
        parsed = pendulum.parse(value)
        if not isinstance(parsed, DateTime):
            raise ValueError(f"Could not parse datetime: {value}")
        return parsed

    @staticmethod
    def _normalize(intervals: List[BusyInterval]) -> List[BusyInterval]:
        """Sort intervals by start and merge the ones that overlap."""
        ordered = sorted(intervals, key=lambda interval: interval.start.total_minutes())
        normalized: List[BusyInterval] = []

        for interval in ordered:
            if normalized and normalized[-1].stop.at_least(interval.start):
                last = normalized[-1]
                normalized[-1] = BusyInterval(start=last.start, stop=later_of(last.stop, interval.stop))
            else:
                normalized.append(interval)

        return normalized
