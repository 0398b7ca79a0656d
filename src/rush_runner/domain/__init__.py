"""Domain layer - core business logic and models."""

from rush_runner.domain.models import (
    DayType,
    Departure,
    Station,
    Timetable,
    TimetableStore,
)
from rush_runner.domain.ports import (
    DisplayAdapter,
    PositionProvider,
    TimetableSource,
)

__all__ = [
    "DayType",
    "Departure",
    "DisplayAdapter",
    "PositionProvider",
    "Station",
    "Timetable",
    "TimetableSource",
    "TimetableStore",
]
