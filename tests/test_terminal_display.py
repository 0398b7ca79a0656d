"""Tests for the terminal display adapter."""

from datetime import datetime
from io import StringIO

import pytest

from rush_runner.adapters.terminal import TerminalDisplay
from rush_runner.adapters.terminal.formatters import ENABLE_LOCATION_MESSAGE
from rush_runner.domain.models import (
    CountdownState,
    CountdownUpdate,
    DayType,
    ErrorDetails,
    RushAlert,
    RushAssessment,
    RushTier,
    SessionContext,
)
from tests.test_departure_resolver import dep, make_station


class TtyStream(StringIO):
    """StringIO pretending to be an interactive terminal."""

    def isatty(self) -> bool:
        return True


def running_update(display: str = "04:09") -> CountdownUpdate:
    """Countdown update for the 06:05 rapid."""
    context = SessionContext(
        day_type=DayType.WEEKDAY, station_id="central", state=CountdownState.RUNNING, generation=1
    )
    return CountdownUpdate(
        context=context,
        state=CountdownState.RUNNING,
        display=display,
        departure=dep(6, 5, train_type="Rapid"),
        departure_time=datetime(2024, 1, 15, 6, 5),
        seconds_remaining=249.0,
    )


@pytest.mark.asyncio
async def test_show_station_and_timetable() -> None:
    """Given a station, when showing it, then header and schedule rows are written."""
    stream = StringIO()
    display = TerminalDisplay(stream)
    station = make_station("central", weekday=[dep(5, 12), dep(6, 5, train_type="Rapid")])

    await display.show_station(station)
    await display.show_timetable(station, DayType.WEEKDAY)

    lines = stream.getvalue().splitlines()
    assert lines[0] == "== Central (Harbor Line) =="
    assert lines[1] == "-- weekday timetable --"
    assert lines[2] == "  05:12  Local      Seaside"
    assert lines[3] == "  06:05  Rapid      Seaside"


@pytest.mark.asyncio
async def test_show_empty_timetable() -> None:
    """Given no departures for the day-type, when showing the timetable, then a placeholder row is written."""
    stream = StringIO()
    display = TerminalDisplay(stream)

    await display.show_timetable(make_station("central", weekday=[]), DayType.HOLIDAY)

    assert stream.getvalue().splitlines() == ["-- holiday timetable --", "  (no departures)"]


@pytest.mark.asyncio
async def test_countdown_lines_when_not_a_terminal() -> None:
    """Given a non-interactive stream, when ticking, then each tick is its own line."""
    stream = StringIO()
    display = TerminalDisplay(stream)

    await display.show_countdown(running_update("04:09"))
    await display.show_countdown(running_update("04:08"))

    assert stream.getvalue().splitlines() == [
        "Next: 06:05 Rapid for Seaside in 04:09",
        "Next: 06:05 Rapid for Seaside in 04:08",
    ]


@pytest.mark.asyncio
async def test_countdown_rewrites_line_on_terminal() -> None:
    """Given an interactive terminal, when ticking, then the countdown line is rewritten in place."""
    stream = TtyStream()
    display = TerminalDisplay(stream)

    await display.show_countdown(running_update("04:09"))
    await display.show_countdown(running_update("04:08"))
    await display.stop()

    output = stream.getvalue()
    assert output.count("\r\033[K") == 2
    assert output.endswith("Next: 06:05 Rapid for Seaside in 04:08\n")


@pytest.mark.asyncio
async def test_service_ended_message() -> None:
    """Given an ended countdown, when showing it, then the placeholder and message are written."""
    stream = StringIO()
    display = TerminalDisplay(stream)
    context = SessionContext(day_type=DayType.WEEKDAY, station_id="central", state=CountdownState.ENDED)

    await display.show_countdown(CountdownUpdate(context=context, state=CountdownState.ENDED))

    assert stream.getvalue() == "--:--  Service has ended for today\n"


@pytest.mark.asyncio
async def test_idle_countdown_writes_nothing() -> None:
    """Given an idle update, when showing it, then nothing is written."""
    stream = StringIO()
    display = TerminalDisplay(stream)

    await display.show_countdown(
        CountdownUpdate(context=SessionContext(day_type=DayType.WEEKDAY), state=CountdownState.IDLE)
    )

    assert stream.getvalue() == ""


@pytest.mark.asyncio
async def test_rush_alerts() -> None:
    """Given rush alerts, when showing them, then tier and message are written; no alert writes nothing."""
    stream = StringIO()
    display = TerminalDisplay(stream)
    warning = RushAlert(
        tier=RushTier.WARNING,
        generation=1,
        assessment=RushAssessment(
            tier=RushTier.WARNING, eta_walk_seconds=357.1, eta_run_seconds=125.0
        ),
    )

    await display.show_rush_alert(warning)
    await display.show_rush_alert(RushAlert(tier=RushTier.UNKNOWN, generation=1))
    await display.show_rush_alert(None)

    assert stream.getvalue().splitlines() == [
        "[warning] 🏃 You might make it if you run (about 3 min running)",
        f"[unknown] {ENABLE_LOCATION_MESSAGE}",
    ]


@pytest.mark.asyncio
async def test_show_error() -> None:
    """Given error details, when showing them, then source and reason are written."""
    stream = StringIO()
    display = TerminalDisplay(stream)

    await display.show_error(ErrorDetails(source="stations.json", reason="file not found"))
    await display.show_error(ErrorDetails(reason="no stations in timetable"))

    assert stream.getvalue().splitlines() == [
        "Error (stations.json): file not found",
        "Error: no stations in timetable",
    ]
