"""Ports (interfaces) for the ports-and-adapters architecture."""

from rush_runner.domain.ports.display_adapter import DisplayAdapter
from rush_runner.domain.ports.position_provider import PositionProvider
from rush_runner.domain.ports.timetable_source import TimetableSource

__all__ = [
    "DisplayAdapter",
    "PositionProvider",
    "TimetableSource",
]
