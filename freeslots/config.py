"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.models import BusyInterval, ClockValue, ParticipantCalendar


def _check_clock_text(value: str) -> str:
    # Shape only; ranges are checked in strict mode
    ClockValue.parse(value)
    return value.strip()


class DefaultsConfig(BaseModel):
    """Default settings for a search."""
    minimum_free_minutes: int = 30
    day_start: str = "09:00"
    day_end: str = "17:00"

    @field_validator("minimum_free_minutes")
    @classmethod
    def validate_minimum(cls, value: int) -> int:
        """Ensure the minimum free duration is not negative."""
        if value < 0:
            raise ValueError("minimum_free_minutes must not be negative")
        return value

    @field_validator("day_start", "day_end")
    @classmethod
    def validate_clock(cls, v: str) -> str:
        """Validate the value looks like HH:MM."""
        return _check_clock_text(v)

    def get_day_start(self) -> ClockValue:
        """Get day start as a clock value."""
        return ClockValue.parse(self.day_start)

    def get_day_end(self) -> ClockValue:
        """Get day end as a clock value."""
        return ClockValue.parse(self.day_end)


class BusyEntry(BaseModel):
    """One busy interval as written in the config file."""
    start: str
    stop: str

    @field_validator("start", "stop")
    @classmethod
    def validate_clock(cls, v: str) -> str:
        return _check_clock_text(v)

    def to_interval(self) -> BusyInterval:
        return BusyInterval(start=ClockValue.parse(self.start), stop=ClockValue.parse(self.stop))


class ParticipantConfig(BaseModel):
    """Participant configuration."""
    name: str  # Used as alias on the command line
    day_start: Optional[str] = None
    day_end: Optional[str] = None
    busy: List[BusyEntry] = Field(default_factory=list)
    calendar_id: str = ""  # Optional: for event file mapping

    @field_validator("day_start", "day_end")
    @classmethod
    def validate_clock(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_clock_text(v)

    def to_calendar(self, defaults: DefaultsConfig) -> ParticipantCalendar:
        """Build the participant's calendar, filling gaps from the defaults."""
        day_start = ClockValue.parse(self.day_start) if self.day_start else defaults.get_day_start()
        day_end = ClockValue.parse(self.day_end) if self.day_end else defaults.get_day_end()
        return ParticipantCalendar(
            busy_intervals=[entry.to_interval() for entry in self.busy],
            day_start=day_start,
            day_end=day_end,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    strict: bool = False
    events_file: Optional[Path] = None
    participants: List[ParticipantConfig] = Field(default_factory=list)

    @field_validator("participants")
    @classmethod
    def validate_participants(cls, value: List[ParticipantConfig]) -> List[ParticipantConfig]:
        """Ensure participant names are unique."""
        seen_names: set[str] = set()
        for participant in value:
            name_key = participant.name.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate participant name detected: {participant.name}")
            seen_names.add(name_key)
        return value

    @model_validator(mode="after")
    def validate_events_file(self) -> "AppConfig":
        """Ensure an events file, when given, is not a directory."""
        if self.events_file is not None and self.events_file.is_dir():
            raise ValueError(f"events_file must be a file, got directory {self.events_file}")
        return self

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        A relative ``events_file`` is resolved against the config file's
        directory.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        events_file = data.get("events_file")
        if events_file and not Path(events_file).is_absolute():
            data["events_file"] = config_path.parent / events_file

        return cls(**data)

    def find_participant_by_name(self, name: str) -> ParticipantConfig | None:
        """Find a participant by their name (alias)."""
        for participant in self.participants:
            if participant.name.lower() == name.lower():
                return participant
        return None


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of freeslots/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
