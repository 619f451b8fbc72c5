"""
Adapters layer - Sources of calendar data (config file, event exports).
"""

from .config_calendar_source import ConfigCalendarSource
from .event_file_calendar_source import EventFileCalendarSource

__all__ = ["ConfigCalendarSource", "EventFileCalendarSource"]
