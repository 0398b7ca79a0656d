"""Main entry point for the rush runner dashboard."""

import argparse
import asyncio
import logging
import sys

from rush_runner.adapters.config import AppConfig
from rush_runner.adapters.position import StaticPositionProvider
from rush_runner.adapters.terminal import Dashboard, TerminalDisplay
from rush_runner.adapters.terminal.formatters import CountdownFormatter
from rush_runner.adapters.timetable import create_timetable_source
from rush_runner.application.services import CountdownEngine, RushAlertService
from rush_runner.domain.errors import TimetableLoadError
from rush_runner.domain.models import DayType, ErrorDetails, TimetableStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the command line entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count down to the next train and tell whether you can still make it",
    )
    parser.add_argument("--config", help="Path to a TOML configuration file")
    parser.add_argument("--station", help="Station ID to show (defaults to the first station)")
    parser.add_argument(
        "--day",
        choices=[day_type.value for day_type in DayType],
        help="Day-type to show (defaults to today's)",
    )
    return parser


def load_config(config_file: str | None = None) -> AppConfig:
    """Load configuration from the environment and, if given, a TOML file.

    Raises:
        ValueError: If a setting is invalid.
        FileNotFoundError: If the TOML file does not exist.
    """
    config = AppConfig()
    if config_file:
        config.config_file = config_file
    if config.config_file:
        config.load_toml()
    return config


async def main(argv: list[str] | None = None) -> int:
    """Main application entry point.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    logging.getLogger().setLevel(config.log_level)

    display = TerminalDisplay()

    try:
        source = create_timetable_source(config)
    except ValueError as e:
        logger.error(str(e))
        await display.show_error(ErrorDetails(reason=str(e)))
        return 1

    try:
        stations = await source.load()
    except TimetableLoadError as e:
        logger.error(str(e))
        await display.show_error(ErrorDetails(source=e.source, reason=e.reason))
        return 1

    store = TimetableStore(stations)
    station_id = args.station or config.station_id or store.first_station_id()
    if station_id is None:
        logger.error(f"No stations found in {source.description}")
        await display.show_error(
            ErrorDetails(source=source.description, reason="no stations in timetable")
        )
        return 1

    day_type = DayType(args.day) if args.day else config.day_type
    if not config.has_position():
        logger.info("No position configured, rush alerts will ask to enable location")

    engine = CountdownEngine(store, CountdownFormatter())
    rush_alert_service = RushAlertService(
        store, StaticPositionProvider(config.latitude, config.longitude)
    )
    dashboard = Dashboard(
        store,
        display,
        engine,
        rush_alert_service,
        interval_seconds=config.tick_interval_seconds,
        day_type=day_type,
    )

    if not await dashboard.run(station_id):
        return 1
    return 0


def cli_main() -> None:
    """Synchronous entry point for the dashboard command."""
    configure_logging()
    try:
        status = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        status = 0
    sys.exit(status)


if __name__ == "__main__":
    cli_main()
