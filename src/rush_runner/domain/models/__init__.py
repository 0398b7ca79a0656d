"""Domain models for rush runner."""

from rush_runner.domain.models.countdown_update import SERVICE_ENDED_DISPLAY, CountdownUpdate
from rush_runner.domain.models.day_type import DayType, day_type_for
from rush_runner.domain.models.departure import Departure
from rush_runner.domain.models.error_details import ErrorDetails
from rush_runner.domain.models.position import Position
from rush_runner.domain.models.resolution_result import NO_DEPARTURE, ResolutionResult
from rush_runner.domain.models.rush_alert import RushAlert, RushAssessment, RushTier
from rush_runner.domain.models.session_context import CountdownState, SessionContext
from rush_runner.domain.models.station import Station
from rush_runner.domain.models.timetable import Timetable
from rush_runner.domain.models.timetable_store import TimetableStore

__all__ = [
    "NO_DEPARTURE",
    "SERVICE_ENDED_DISPLAY",
    "CountdownState",
    "CountdownUpdate",
    "DayType",
    "Departure",
    "ErrorDetails",
    "Position",
    "ResolutionResult",
    "RushAlert",
    "RushAssessment",
    "RushTier",
    "SessionContext",
    "Station",
    "Timetable",
    "TimetableStore",
    "day_type_for",
]
