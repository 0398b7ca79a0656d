"""Rush alert service: position fix plus classification for a session context."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from rush_runner.application.services.countdown_engine import departure_datetime
from rush_runner.application.services.departure_resolver import resolve_next
from rush_runner.application.services.rush_alert_classifier import classify, distance_meters
from rush_runner.domain.errors import PositionUnavailableError
from rush_runner.domain.models.rush_alert import RushAlert, RushTier

if TYPE_CHECKING:
    from rush_runner.domain.models.session_context import SessionContext
    from rush_runner.domain.models.timetable_store import TimetableStore
    from rush_runner.domain.ports.position_provider import PositionProvider

logger = logging.getLogger(__name__)


class RushAlertService:
    """Evaluates whether the rider can reach the next departure.

    Evaluations are serialised: a new position request is only issued once the
    previous one has resolved. Requests in flight are never cancelled; the
    alerts they produce carry the generation of the context they were made for,
    and ``is_current`` tells whether that context is still the active one.
    """

    def __init__(
        self,
        store: TimetableStore,
        position_provider: PositionProvider,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the service.

        Args:
            store: Station timetables.
            position_provider: Source of the rider's position.
            clock: Returns the current local time.
        """
        self.store = store
        self.position_provider = position_provider
        self.clock = clock
        self._lock = asyncio.Lock()

    async def evaluate(self, context: SessionContext) -> RushAlert | None:
        """Evaluate the rush alert for a context.

        Returns:
            None when there is nothing to rush for (no station or no departure),
            an UNKNOWN alert when the position is unavailable, otherwise the
            classified alert.
        """
        station = self.store.get(context.station_id)
        if station is None:
            return None

        now = self.clock()
        result = resolve_next(station.timetable, context.day_type, now)
        if result.departure is None:
            return None
        departure_time = departure_datetime(result.departure, now)

        async with self._lock:
            try:
                position = await self.position_provider.get_position()
            except PositionUnavailableError as e:
                logger.warning(f"Position unavailable: {e.reason}")
                return RushAlert(
                    tier=RushTier.UNKNOWN,
                    generation=context.generation,
                    reason=e.reason,
                )

        distance = distance_meters(
            position.latitude, position.longitude, station.latitude, station.longitude
        )
        # Budget measured after the fix arrived
        seconds_until_departure = (departure_time - self.clock()).total_seconds()
        assessment = classify(distance, seconds_until_departure)
        logger.debug(
            f"Rush alert for {station.id}: {assessment.tier.value} "
            f"(distance {distance:.0f}m, {seconds_until_departure:.0f}s left)"
        )
        return RushAlert(
            tier=assessment.tier,
            generation=context.generation,
            assessment=assessment,
            distance_meters=distance,
            seconds_until_departure=seconds_until_departure,
        )

    @staticmethod
    def is_current(alert: RushAlert, context: SessionContext) -> bool:
        """Whether an alert was requested for the given (current) context."""
        return alert.generation == context.generation
