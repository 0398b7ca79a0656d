"""Tests for the dashboard entry point."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from rush_runner.main import build_parser, load_config, main


@pytest.fixture
def closed_stations(tmp_path: Path) -> Path:
    """Stations file with one station that has no service at all."""
    path = tmp_path / "stations.json"
    path.write_text(
        json.dumps(
            {
                "closed": {
                    "stationName": "Closed",
                    "lineName": "Ghost Line",
                    "latitude": 35.0,
                    "longitude": 139.0,
                    "timetable": {"weekday": [], "holiday": []},
                }
            }
        ),
        encoding="utf-8",
    )
    return path


def test_build_parser_options() -> None:
    """Given dashboard arguments, when parsing, then station, day and config are available."""
    args = build_parser().parse_args(["--station", "central", "--day", "holiday", "--config", "x.toml"])

    assert args.station == "central"
    assert args.day == "holiday"
    assert args.config == "x.toml"


def test_build_parser_rejects_unknown_day() -> None:
    """Given an unknown day-type, when parsing, then argparse exits."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--day", "someday"])


def test_load_config_without_file() -> None:
    """Given no config file, when loading config, then environment settings are used."""
    with patch.dict(os.environ, {"STATION_ID": "riverside"}, clear=True):
        config = load_config()

    assert config.station_id == "riverside"


def test_load_config_missing_file() -> None:
    """Given a config file that does not exist, when loading config, then FileNotFoundError is raised."""
    with patch.dict(os.environ, {}, clear=True), pytest.raises(FileNotFoundError):
        load_config("nonexistent.toml")


@pytest.mark.asyncio
async def test_main_runs_until_service_ends(
    closed_stations: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a station without service, when running the dashboard, then it shows service ended and exits 0."""
    with patch.dict(os.environ, {"TIMETABLE_FILE": str(closed_stations)}, clear=True):
        status = await main([])

    out = capsys.readouterr().out
    assert status == 0
    assert "== Closed (Ghost Line) ==" in out
    assert "--:--  Service has ended for today" in out


@pytest.mark.asyncio
async def test_main_missing_timetable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a missing timetable file, when running the dashboard, then an error is shown and it exits 1."""
    missing = tmp_path / "missing.json"
    with patch.dict(os.environ, {"TIMETABLE_FILE": str(missing)}, clear=True):
        status = await main([])

    assert status == 1
    assert f"Error ({missing}): file not found" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_unknown_station(
    closed_stations: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an unknown station, when running the dashboard, then an error is shown and it exits 1."""
    with patch.dict(os.environ, {"TIMETABLE_FILE": str(closed_stations)}, clear=True):
        status = await main(["--station", "airport"])

    assert status == 1
    assert "Unknown station 'airport'" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_empty_timetable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a timetable without stations, when running the dashboard, then it exits 1."""
    path = tmp_path / "stations.json"
    path.write_text("{}", encoding="utf-8")
    with patch.dict(os.environ, {"TIMETABLE_FILE": str(path)}, clear=True):
        status = await main([])

    assert status == 1
    assert "no stations in timetable" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_invalid_config() -> None:
    """Given an invalid setting, when running the dashboard, then it exits 1."""
    with patch.dict(os.environ, {"TICK_INTERVAL_SECONDS": "-1"}, clear=True):
        status = await main([])

    assert status == 1
