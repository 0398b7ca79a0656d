"""Departure resolution: which train is the next one."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from rush_runner.domain.models.day_type import DayType, day_type_for
from rush_runner.domain.models.resolution_result import NO_DEPARTURE, ResolutionResult

if TYPE_CHECKING:
    from rush_runner.domain.models.timetable import Timetable

logger = logging.getLogger(__name__)


def resolve_next(
    timetable: Timetable | None, day_type: DayType, now: datetime
) -> ResolutionResult:
    """Find the next departure after ``now``.

    Scans today's schedule for the active day-type and returns the first
    departure strictly later than ``now``; a train scheduled exactly at ``now``
    has already left. When the last train of the day has gone, the first train
    of tomorrow's day-type is returned instead (one day boundary at most), and
    the result reports whether the day-type changes.

    Never raises for missing data: an absent timetable or an empty schedule
    yields a result without a departure.

    Args:
        timetable: The station's timetable, or None when unavailable.
        day_type: The active day-type.
        now: Current local wall-clock time (naive).

    Returns:
        The resolution result.
    """
    if timetable is None:
        logger.debug("No timetable available, nothing to resolve")
        return NO_DEPARTURE

    today = now.date()
    for departure in timetable.departures_for(day_type):
        if departure.at(today) > now:
            return ResolutionResult(departure=departure, day_type=day_type)

    # Last train has gone: service resumes with tomorrow's first train
    next_day_type = day_type_for(today + timedelta(days=1))
    next_day_departures = timetable.departures_for(next_day_type)
    if not next_day_departures:
        logger.debug(f"No {next_day_type.value} departures after {now:%Y-%m-%d %H:%M}")
        return NO_DEPARTURE

    first_departure = next_day_departures[0]
    if next_day_type != day_type:
        logger.info(
            f"Last {day_type.value} train has left, switching to {next_day_type.value} schedule"
        )
        return ResolutionResult(
            departure=first_departure,
            day_type_changed=True,
            new_day_type=next_day_type,
            day_type=next_day_type,
        )
    return ResolutionResult(departure=first_departure, day_type=day_type)
