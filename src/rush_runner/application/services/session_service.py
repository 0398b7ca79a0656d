"""Transitions of the rider session context."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from rush_runner.domain.models.day_type import DayType, day_type_for
from rush_runner.domain.models.session_context import CountdownState, SessionContext

logger = logging.getLogger(__name__)


def initial_context(today: date, day_type: DayType | None = None) -> SessionContext:
    """Create the idle context for a new session.

    Args:
        today: The current calendar date, used to derive the day-type.
        day_type: Explicit day-type overriding the derived one.
    """
    return SessionContext(day_type=day_type or day_type_for(today))


def select_station(context: SessionContext, station_id: str) -> SessionContext:
    """Select a station; the countdown (re)starts for it."""
    new_context = replace(
        context,
        station_id=station_id,
        state=CountdownState.RUNNING,
        generation=context.generation + 1,
    )
    logger.debug(f"Selected station {station_id} (generation {new_context.generation})")
    return new_context


def select_day_type(context: SessionContext, day_type: DayType) -> SessionContext:
    """Select a day-type; restarts the countdown when a station is selected."""
    state = CountdownState.RUNNING if context.station_id is not None else CountdownState.IDLE
    new_context = replace(
        context,
        day_type=day_type,
        state=state,
        generation=context.generation + 1,
    )
    logger.debug(f"Selected day-type {day_type.value} (generation {new_context.generation})")
    return new_context
