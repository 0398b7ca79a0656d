"""Departure domain model."""

from dataclasses import dataclass
from datetime import date, datetime, time


@dataclass(frozen=True)
class Departure:
    """Represents one scheduled train leaving a station."""

    train_type: str  # Service label (e.g., "Local", "Rapid")
    destination: str
    hour: int  # 0-23
    minute: int  # 0-59

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be between 0 and 59, got {self.minute}")

    @property
    def time_of_day(self) -> time:
        """Scheduled time without a date."""
        return time(self.hour, self.minute)

    def at(self, day: date) -> datetime:
        """Combine the scheduled time with a calendar date (naive local time)."""
        return datetime.combine(day, self.time_of_day)
