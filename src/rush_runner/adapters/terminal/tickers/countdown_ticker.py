"""Ticker driving the countdown engine on a fixed cadence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from rush_runner.domain.contracts.countdown_ticker import CountdownTickerProtocol
from rush_runner.domain.models.session_context import CountdownState

if TYPE_CHECKING:
    from rush_runner.application.services.countdown_engine import CountdownEngine
    from rush_runner.domain.contracts.countdown_sink import CountdownSinkProtocol
    from rush_runner.domain.models.countdown_update import CountdownUpdate
    from rush_runner.domain.models.session_context import SessionContext

logger = logging.getLogger(__name__)


class CountdownTicker(CountdownTickerProtocol):
    """Runs at most one countdown task at a time.

    The first tick happens immediately, then one per interval. The task ends on
    its own once the countdown leaves the RUNNING state (service ended or no
    station), and only ``restart`` schedules ticks again.
    """

    def __init__(
        self,
        engine: CountdownEngine,
        sink: CountdownSinkProtocol,
        interval_seconds: float = 1.0,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the ticker.

        Args:
            engine: Engine computing each tick.
            sink: Receiver of the countdown updates.
            interval_seconds: Time between ticks.
            clock: Returns the current local time.
        """
        self.engine = engine
        self.sink = sink
        self.interval_seconds = interval_seconds
        self.clock = clock
        self.context: SessionContext | None = None
        self._task: asyncio.Task | None = None
        self._restart_lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def restart(self, context: SessionContext) -> None:
        """Replace the running countdown with one for ``context``.

        Stopping the old task and starting the new one is a single step; no two
        tick tasks ever run side by side.
        """
        async with self._restart_lock:
            await self._cancel_task()
            self.context = context
            self._task = asyncio.create_task(self._tick_loop(context))
            logger.debug(f"Started countdown ticker for station {context.station_id}")

    async def stop(self) -> None:
        """Stop the ticker."""
        async with self._restart_lock:
            await self._cancel_task()

    async def wait(self) -> None:
        """Wait until the countdown finishes (service ended or stopped).

        A ``restart`` while waiting replaces the task; waiting then continues on
        the new one.
        """
        while True:
            task = self._task
            if task is None:
                return
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
            # A pending restart or stop holds the lock until the task is replaced
            async with self._restart_lock:
                if self._task is None or self._task is task:
                    return

    async def _cancel_task(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.debug("Countdown ticker cancelled")
            logger.info("Stopped countdown ticker")
        self._task = None

    async def _tick_loop(self, context: SessionContext) -> None:
        """Main tick loop."""
        update = self.engine.start(context, self.clock())
        try:
            while True:
                self.context = update.context
                await self._publish(update)
                if update.state is not CountdownState.RUNNING:
                    logger.info(
                        f"Countdown stopped in state {update.state.value} "
                        f"for station {update.context.station_id}"
                    )
                    return
                await asyncio.sleep(self.interval_seconds)
                update = self.engine.tick(update.context, self.clock())
        except asyncio.CancelledError:
            logger.debug("Countdown ticker loop cancelled")
            raise

    async def _publish(self, update: CountdownUpdate) -> None:
        """Hand an update to the sink; a failing sink does not stop the countdown."""
        try:
            await self.sink.handle_countdown(update)
        except Exception as e:
            logger.error(f"Error handling countdown update (will keep ticking): {e}", exc_info=True)
