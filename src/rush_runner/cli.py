"""CLI helpers for inspecting timetables and rush alerts."""

import argparse
import asyncio
import json
import sys
from datetime import datetime
from typing import Any

from rush_runner.adapters.terminal.formatters import CountdownFormatter, RushAlertFormatter
from rush_runner.adapters.timetable import create_timetable_source
from rush_runner.application.services import classify, departure_datetime, resolve_next
from rush_runner.domain.errors import TimetableLoadError
from rush_runner.domain.models import (
    DayType,
    RushAlert,
    Station,
    TimetableStore,
    day_type_for,
)
from rush_runner.main import configure_logging, load_config


def parse_at(value: str) -> datetime:
    """Parse an --at value: 'YYYY-MM-DD HH:MM' or 'HH:MM' (today)."""
    for fmt in ("%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M"):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            pass
    try:
        parsed = datetime.strptime(value, "%H:%M")
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid time '{value}', expected 'YYYY-MM-DD HH:MM' or 'HH:MM'"
        ) from None
    return datetime.combine(datetime.now().date(), parsed.time())


async def load_store(config_file: str | None, timetable: str | None) -> TimetableStore:
    """Load the timetable store, honouring a --timetable override (path or URL).

    Raises:
        TimetableLoadError: If the timetable cannot be loaded.
    """
    config = load_config(config_file)
    if timetable:
        if timetable.startswith(("http://", "https://")):
            config.timetable_url = timetable
        else:
            config.timetable_url = None
            config.timetable_file = timetable
    source = create_timetable_source(config)
    return TimetableStore(await source.load())


def station_summary(station: Station) -> dict[str, Any]:
    """Summarise a station for listing."""
    return {
        "id": station.id,
        "name": station.name,
        "line": station.line_name,
        "latitude": station.latitude,
        "longitude": station.longitude,
        "departures": {
            day_type.value: len(station.timetable.departures_for(day_type)) for day_type in DayType
        },
    }


def timetable_rows(station: Station, day_type: DayType) -> list[dict[str, str]]:
    """Rows of a station's schedule for a day-type."""
    formatter = CountdownFormatter()
    return [
        {
            "time": formatter.format_departure_time(departure),
            "type": departure.train_type,
            "destination": departure.destination,
        }
        for departure in station.timetable.departures_for(day_type)
    ]


def next_departure_info(station: Station, day_type: DayType, now: datetime) -> dict[str, Any]:
    """Resolve the next departure and describe it."""
    result = resolve_next(station.timetable, day_type, now)
    if result.departure is None:
        return {"station": station.id, "day_type": day_type.value, "service_ended": True}

    departure_time = departure_datetime(result.departure, now)
    delta = departure_time - now
    return {
        "station": station.id,
        "day_type": (result.day_type or day_type).value,
        "day_type_changed": result.day_type_changed,
        "service_ended": False,
        "type": result.departure.train_type,
        "destination": result.departure.destination,
        "departure_time": departure_time.isoformat(timespec="minutes"),
        "countdown": CountdownFormatter().format_countdown(delta),
        "seconds_remaining": int(delta.total_seconds()),
    }


def rush_info(distance: float, seconds: float) -> dict[str, Any]:
    """Classify a distance against a time budget."""
    assessment = classify(distance, seconds)
    alert = RushAlert(tier=assessment.tier, generation=0, assessment=assessment)
    return {
        "tier": assessment.tier.value,
        "eta_walk_seconds": round(assessment.eta_walk_seconds, 1),
        "eta_run_seconds": round(assessment.eta_run_seconds, 1),
        "message": RushAlertFormatter().format_alert(alert),
    }


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _require_station(store: TimetableStore, station_id: str) -> Station:
    station = store.get(station_id)
    if station is None:
        print(f"Station {station_id} not found.", file=sys.stderr)
        sys.exit(1)
    return station


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Rush Runner timetable helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all stations, or search by name
  rush-runner-cli stations
  rush-runner-cli stations "central"

  # Show the holiday timetable of a station
  rush-runner-cli timetable central --day holiday

  # Next departure at a given time
  rush-runner-cli next central --at "2024-01-19 23:59"

  # Can I make it? 500 m to go, 3 minutes left
  rush-runner-cli rush 500 180
        """,
    )
    parser.add_argument("--config", help="Path to a TOML configuration file")
    parser.add_argument("--timetable", help="Stations JSON file path or URL")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    day_choices = [day_type.value for day_type in DayType]

    stations_parser = subparsers.add_parser("stations", help="List or search stations")
    stations_parser.add_argument("query", nargs="?", help="Part of the station name")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    timetable_parser = subparsers.add_parser("timetable", help="Show a station's timetable")
    timetable_parser.add_argument("station_id", help="Station ID")
    timetable_parser.add_argument("--day", choices=day_choices, help="Day-type (default: today's)")
    timetable_parser.add_argument("--json", action="store_true", help="Output as JSON")

    next_parser = subparsers.add_parser("next", help="Show the next departure")
    next_parser.add_argument("station_id", help="Station ID")
    next_parser.add_argument("--day", choices=day_choices, help="Day-type (default: that day's)")
    next_parser.add_argument(
        "--at", type=parse_at, help="Time to resolve at ('YYYY-MM-DD HH:MM' or 'HH:MM')"
    )
    next_parser.add_argument("--json", action="store_true", help="Output as JSON")

    rush_parser = subparsers.add_parser("rush", help="Classify whether a train is reachable")
    rush_parser.add_argument("distance", type=float, help="Distance to the station in meters")
    rush_parser.add_argument("seconds", type=float, help="Seconds until departure")
    rush_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "rush":
            info = rush_info(args.distance, args.seconds)
            if args.json:
                _print_json(info)
            else:
                print(f"{info['tier'].upper()}: {info['message']}")
                print(f"  walk ~{info['eta_walk_seconds']}s, run ~{info['eta_run_seconds']}s")
            return

        store = await load_store(args.config, args.timetable)

        if args.command == "stations":
            stations = (
                store.search(args.query)
                if args.query
                else [store.get(station_id) for station_id in store.station_ids()]
            )
            summaries = [station_summary(station) for station in stations if station is not None]
            if args.json:
                _print_json(summaries)
            else:
                if not summaries:
                    print(f"No stations found for '{args.query}'", file=sys.stderr)
                    sys.exit(1)
                print(f"\nFound {len(summaries)} station(s):\n")
                for summary in summaries:
                    print(f"  {summary['name']} ({summary['line']})")
                    print(f"    ID: {summary['id']}")
                    print()

        elif args.command == "timetable":
            station = _require_station(store, args.station_id)
            day_type = DayType(args.day) if args.day else day_type_for(datetime.now().date())
            rows = timetable_rows(station, day_type)
            if args.json:
                _print_json({"station": station.id, "day_type": day_type.value, "departures": rows})
            else:
                print(f"\n{station.name} ({station.line_name}) - {day_type.value}\n")
                if not rows:
                    print("  (no departures)")
                for row in rows:
                    print(f"  {row['time']}  {row['type']:<10} {row['destination']}")

        elif args.command == "next":
            station = _require_station(store, args.station_id)
            now = args.at or datetime.now()
            day_type = DayType(args.day) if args.day else day_type_for(now.date())
            info = next_departure_info(station, day_type, now)
            if args.json:
                _print_json(info)
            elif info["service_ended"]:
                print("--:--  Service has ended for today")
            else:
                print(
                    f"{info['departure_time']} {info['type']} for {info['destination']} "
                    f"in {info['countdown']}"
                )
                if info["day_type_changed"]:
                    print(f"  (switched to the {info['day_type']} timetable)")

    except TimetableLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    configure_logging("WARNING")
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
