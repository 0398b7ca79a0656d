"""Dashboard: wires selections, countdown and rush alerts to a display."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from rush_runner.adapters.terminal.tickers import CountdownTicker
from rush_runner.application.services.session_service import (
    initial_context,
    select_day_type,
    select_station,
)
from rush_runner.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from rush_runner.application.services.countdown_engine import CountdownEngine
    from rush_runner.application.services.rush_alert_service import RushAlertService
    from rush_runner.domain.models.countdown_update import CountdownUpdate
    from rush_runner.domain.models.day_type import DayType
    from rush_runner.domain.models.rush_alert import RushAlert
    from rush_runner.domain.models.timetable_store import TimetableStore
    from rush_runner.domain.ports.display_adapter import DisplayAdapter

logger = logging.getLogger(__name__)


class Dashboard:
    """Owns the current session context of one rider.

    Station and day-type selections produce a new context generation, restart
    the countdown ticker and request a rush alert. Countdown updates and rush
    alerts that belong to an older generation are dropped.
    """

    def __init__(
        self,
        store: TimetableStore,
        display: DisplayAdapter,
        engine: CountdownEngine,
        rush_alert_service: RushAlertService,
        interval_seconds: float = 1.0,
        clock: Callable[[], datetime] = datetime.now,
        day_type: DayType | None = None,
    ) -> None:
        """Initialize the dashboard.

        Args:
            store: Station timetables.
            display: Where to show everything.
            engine: Countdown engine.
            rush_alert_service: Rush alert evaluation.
            interval_seconds: Countdown cadence.
            clock: Returns the current local time.
            day_type: Initial day-type; derived from today when None.
        """
        self.store = store
        self.display = display
        self.rush_alert_service = rush_alert_service
        self.clock = clock
        self.context = initial_context(clock().date(), day_type)
        self.ticker = CountdownTicker(engine, self, interval_seconds=interval_seconds, clock=clock)
        self._rush_tasks: set[asyncio.Task] = set()

    async def select_station(self, station_id: str) -> bool:
        """Switch to a station.

        Returns:
            False if the station is unknown (an error is shown instead).
        """
        station = self.store.get(station_id)
        if station is None:
            logger.warning(f"Unknown station: {station_id}")
            await self.display.show_error(ErrorDetails(reason=f"Unknown station '{station_id}'"))
            return False

        self.context = select_station(self.context, station_id)
        await self.display.show_station(station)
        await self.display.show_timetable(station, self.context.day_type)
        await self.ticker.restart(self.context)
        self._request_rush_alert()
        return True

    async def select_day_type(self, day_type: DayType) -> None:
        """Switch the schedule shown for the current station."""
        self.context = select_day_type(self.context, day_type)
        station = self.store.get(self.context.station_id)
        if station is None:
            return
        await self.display.show_timetable(station, self.context.day_type)
        await self.ticker.restart(self.context)
        self._request_rush_alert()

    async def handle_countdown(self, update: CountdownUpdate) -> None:
        """Apply a countdown tick to the display."""
        if update.context.generation != self.context.generation:
            logger.debug("Dropping countdown update from a previous selection")
            return

        self.context = update.context
        if update.refresh_timetable:
            station = self.store.get(self.context.station_id)
            if station is not None:
                await self.display.show_timetable(station, self.context.day_type)
        await self.display.show_countdown(update)

    async def refresh_rush_alert(self) -> RushAlert | None:
        """Evaluate the rush alert for the current context and show it if still current."""
        context = self.context
        alert = await self.rush_alert_service.evaluate(context)

        if alert is None:
            if context.generation != self.context.generation:
                logger.debug("Discarding rush alert result for a previous selection")
                return None
        elif not self.rush_alert_service.is_current(alert, self.context):
            logger.debug(
                f"Discarding stale rush alert (generation {alert.generation}, "
                f"current {self.context.generation})"
            )
            return None

        await self.display.show_rush_alert(alert)
        return alert

    def _request_rush_alert(self) -> None:
        task = asyncio.create_task(self._rush_alert_with_error_handling())
        self._rush_tasks.add(task)
        task.add_done_callback(self._rush_tasks.discard)

    async def _rush_alert_with_error_handling(self) -> None:
        try:
            await self.refresh_rush_alert()
        except Exception as e:
            logger.error(f"Error evaluating rush alert: {e}", exc_info=True)

    async def run(self, station_id: str) -> bool:
        """Show a station and count down until service ends.

        Returns:
            False if the station is unknown.
        """
        await self.display.start()
        try:
            if not await self.select_station(station_id):
                return False
            await self.ticker.wait()
            if self._rush_tasks:
                await asyncio.gather(*self._rush_tasks, return_exceptions=True)
            return True
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop ticking and drop pending rush alert requests."""
        await self.ticker.stop()
        for task in list(self._rush_tasks):
            task.cancel()
        await self.display.stop()
