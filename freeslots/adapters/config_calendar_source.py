"""
Calendar source backed by the busy entries written in the YAML config.
"""

from __future__ import annotations

import logging

from ..config import AppConfig
from ..domain.exceptions import UnknownParticipantError
from ..domain.models import ParticipantCalendar

logger = logging.getLogger(__name__)


class ConfigCalendarSource:
    """Builds calendars straight from ``AppConfig.participants``."""

    def __init__(self, config: AppConfig):
        self.config = config

    def load_calendar(self, participant: str) -> ParticipantCalendar:
        """
        Return the configured calendar for a participant.

        Raises:
            UnknownParticipantError: If the name is not configured
        """
        participant_config = self.config.find_participant_by_name(participant)
        if participant_config is None:
            raise UnknownParticipantError(
                f"Unknown participant: '{participant}'. Use a name from the config file."
            )

        calendar = participant_config.to_calendar(self.config.defaults)
        logger.debug(
            "Loaded %d busy interval(s) for %s from config",
            len(calendar.busy_intervals),
            participant_config.name,
        )
        return calendar
