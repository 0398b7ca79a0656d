"""Application services."""

from rush_runner.application.services.countdown_engine import CountdownEngine, departure_datetime
from rush_runner.application.services.departure_resolver import resolve_next
from rush_runner.application.services.rush_alert_classifier import classify, distance_meters
from rush_runner.application.services.rush_alert_service import RushAlertService
from rush_runner.application.services.session_service import (
    initial_context,
    select_day_type,
    select_station,
)

__all__ = [
    "CountdownEngine",
    "RushAlertService",
    "classify",
    "departure_datetime",
    "distance_meters",
    "initial_context",
    "resolve_next",
    "select_day_type",
    "select_station",
]
