"""Adapters layer - external system integrations."""

from rush_runner.adapters.config import AppConfig
from rush_runner.adapters.position import StaticPositionProvider
from rush_runner.adapters.timetable import (
    FileTimetableSource,
    HttpTimetableSource,
    create_timetable_source,
)

__all__ = [
    "AppConfig",
    "FileTimetableSource",
    "HttpTimetableSource",
    "StaticPositionProvider",
    "create_timetable_source",
]
