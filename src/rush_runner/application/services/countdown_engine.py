"""Countdown engine: turns the next departure into display values."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from rush_runner.application.services.departure_resolver import resolve_next
from rush_runner.domain.models.countdown_update import CountdownUpdate
from rush_runner.domain.models.session_context import CountdownState, SessionContext

if TYPE_CHECKING:
    from rush_runner.domain.contracts.countdown_formatter import CountdownFormatterProtocol
    from rush_runner.domain.models.departure import Departure
    from rush_runner.domain.models.timetable_store import TimetableStore

logger = logging.getLogger(__name__)


def departure_datetime(departure: Departure, now: datetime) -> datetime:
    """Place a departure on today's date, or tomorrow's when today's time has passed."""
    departure_time = departure.at(now.date())
    if departure_time < now:
        departure_time += timedelta(days=1)
    return departure_time


class CountdownEngine:
    """Computes one countdown tick per call.

    Holds no session state: the context goes in and the context for the next
    tick comes out with the update.
    """

    def __init__(self, store: TimetableStore, formatter: CountdownFormatterProtocol) -> None:
        """Initialize the engine.

        Args:
            store: Station timetables.
            formatter: Formatter for the remaining time.
        """
        self.store = store
        self.formatter = formatter

    def start(self, context: SessionContext, now: datetime) -> CountdownUpdate:
        """Start (or restart after ENDED) the countdown and compute the first tick.

        Without a selected station the context stays IDLE.
        """
        if context.station_id is None:
            idle = replace(context, state=CountdownState.IDLE)
            return CountdownUpdate(context=idle, state=CountdownState.IDLE)
        return self.tick(replace(context, state=CountdownState.RUNNING), now)

    def tick(self, context: SessionContext, now: datetime) -> CountdownUpdate:
        """Resolve the next departure at ``now`` and build the display values."""
        if context.station_id is None:
            return CountdownUpdate(context=context, state=CountdownState.IDLE)
        if context.state is CountdownState.ENDED:
            # Inactive until restarted by a new selection
            return CountdownUpdate(context=context, state=CountdownState.ENDED)

        station = self.store.get(context.station_id)
        if station is None:
            logger.warning(f"Unknown station {context.station_id}, no service to count down to")
        result = resolve_next(station.timetable if station else None, context.day_type, now)

        if result.departure is None:
            logger.info(f"Service ended for station {context.station_id} ({context.day_type.value})")
            ended = replace(context, state=CountdownState.ENDED)
            return CountdownUpdate(context=ended, state=CountdownState.ENDED)

        next_context = replace(context, state=CountdownState.RUNNING)
        if result.day_type_changed and result.new_day_type is not None:
            next_context = replace(next_context, day_type=result.new_day_type)

        departure_time = departure_datetime(result.departure, now)
        delta = max(departure_time - now, timedelta(0))

        return CountdownUpdate(
            context=next_context,
            state=CountdownState.RUNNING,
            display=self.formatter.format_countdown(delta),
            departure=result.departure,
            departure_time=departure_time,
            seconds_remaining=delta.total_seconds(),
            refresh_timetable=result.day_type_changed,
        )
