"""Terminal display adapter."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from rush_runner.adapters.terminal.formatters import CountdownFormatter, RushAlertFormatter
from rush_runner.domain.models.session_context import CountdownState
from rush_runner.domain.ports.display_adapter import DisplayAdapter

if TYPE_CHECKING:
    from rush_runner.domain.models.countdown_update import CountdownUpdate
    from rush_runner.domain.models.day_type import DayType
    from rush_runner.domain.models.error_details import ErrorDetails
    from rush_runner.domain.models.rush_alert import RushAlert
    from rush_runner.domain.models.station import Station

logger = logging.getLogger(__name__)

SERVICE_ENDED_MESSAGE = "Service has ended for today"


class TerminalDisplay(DisplayAdapter):
    """Writes the dashboard to a text stream.

    On an interactive terminal the countdown line is rewritten in place;
    otherwise every tick is written on its own line.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        countdown_formatter: CountdownFormatter | None = None,
        rush_alert_formatter: RushAlertFormatter | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.countdown_formatter = countdown_formatter or CountdownFormatter()
        self.rush_alert_formatter = rush_alert_formatter or RushAlertFormatter()
        self.live = bool(getattr(self.stream, "isatty", lambda: False)())
        self._countdown_line_open = False

    def _write_line(self, text: str) -> None:
        if self._countdown_line_open:
            self.stream.write("\n")
            self._countdown_line_open = False
        self.stream.write(text + "\n")
        self.stream.flush()

    async def show_station(self, station: Station) -> None:
        """Show the station header."""
        self._write_line(f"== {station.name} ({station.line_name}) ==")

    async def show_timetable(self, station: Station, day_type: DayType) -> None:
        """Show the schedule of the station for a day-type."""
        departures = station.timetable.departures_for(day_type)
        self._write_line(f"-- {day_type.value} timetable --")
        if not departures:
            self._write_line("  (no departures)")
            return
        for departure in departures:
            time_text = self.countdown_formatter.format_departure_time(departure)
            self._write_line(f"  {time_text}  {departure.train_type:<10} {departure.destination}")

    async def show_countdown(self, update: CountdownUpdate) -> None:
        """Show one countdown tick."""
        if update.state is CountdownState.ENDED:
            self._write_line(f"{update.display}  {SERVICE_ENDED_MESSAGE}")
            return
        if update.state is CountdownState.IDLE or update.departure is None:
            return

        departure_text = self.countdown_formatter.format_departure_time(update.departure)
        line = (
            f"Next: {departure_text} {update.departure.train_type} "
            f"for {update.departure.destination} in {update.display}"
        )
        if self.live:
            self.stream.write("\r\033[K" + line)
            self._countdown_line_open = True
            self.stream.flush()
        else:
            self._write_line(line)

    async def show_rush_alert(self, alert: RushAlert | None) -> None:
        """Show a rush alert; nothing is shown when there is no alert."""
        if alert is None:
            return
        self._write_line(f"[{alert.tier.value}] {self.rush_alert_formatter.format_alert(alert)}")

    async def show_error(self, details: ErrorDetails) -> None:
        """Show an error state."""
        source = f" ({details.source})" if details.source else ""
        self._write_line(f"Error{source}: {details.reason}")

    async def start(self) -> None:
        """Start the display adapter."""
        logger.debug("Terminal display started")

    async def stop(self) -> None:
        """Stop the display adapter."""
        if self._countdown_line_open:
            self.stream.write("\n")
            self.stream.flush()
            self._countdown_line_open = False
        logger.debug("Terminal display stopped")
