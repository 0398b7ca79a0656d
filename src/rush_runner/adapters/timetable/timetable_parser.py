"""Parser for the stations JSON layout.

Layout::

    {
      "<station id>": {
        "stationName": "...",
        "lineName": "...",
        "latitude": 35.0,
        "longitude": 139.0,
        "timetable": {
          "weekday": [{"type": "Local", "destination": "...", "hour": 5, "minute": 7}],
          "holiday": [...]
        }
      }
    }
"""

import logging
from typing import Any

from rush_runner.domain.models.day_type import DayType
from rush_runner.domain.models.departure import Departure
from rush_runner.domain.models.station import Station
from rush_runner.domain.models.timetable import Timetable

logger = logging.getLogger(__name__)


class TimetableParser:
    """Builds domain stations from decoded JSON data.

    Malformed entries are skipped with a warning rather than failing the load.
    """

    @staticmethod
    def parse(data: Any) -> dict[str, Station]:
        """Parse all stations.

        Raises:
            ValueError: If the top level is not an object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"stations data must be an object, got {type(data).__name__}")

        stations: dict[str, Station] = {}
        for station_id, station_data in data.items():
            station = TimetableParser.parse_station(str(station_id), station_data)
            if station is not None:
                stations[station.id] = station
        return stations

    @staticmethod
    def parse_station(station_id: str, station_data: Any) -> Station | None:
        """Parse one station record, or None when it is unusable."""
        if not isinstance(station_data, dict):
            logger.warning(f"Skipping station {station_id}: record is not an object")
            return None

        name = station_data.get("stationName", station_id)
        if not isinstance(name, str) or not name:
            name = station_id
        line_name = station_data.get("lineName", "")
        if not isinstance(line_name, str):
            line_name = str(line_name)

        try:
            latitude = float(station_data["latitude"])
            longitude = float(station_data["longitude"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Skipping station {station_id}: missing or invalid coordinates")
            return None

        timetable_data = station_data.get("timetable", {})
        if not isinstance(timetable_data, dict):
            logger.warning(f"Station {station_id}: timetable is not an object, using empty timetable")
            timetable_data = {}

        departures: dict[DayType, tuple[Departure, ...]] = {}
        for day_type in DayType:
            entries = timetable_data.get(day_type.value)
            if entries is None:
                continue
            if not isinstance(entries, list):
                logger.warning(f"Station {station_id}: {day_type.value} timetable is not a list")
                continue
            trains = TimetableParser.parse_departures(station_id, day_type, entries)
            if not _is_sorted(trains):
                logger.warning(
                    f"Station {station_id}: {day_type.value} departures are not in time order, "
                    "sorting them"
                )
            departures[day_type] = tuple(trains)

        return Station(
            id=station_id,
            name=name,
            line_name=line_name,
            latitude=latitude,
            longitude=longitude,
            timetable=Timetable(departures),
        )

    @staticmethod
    def parse_departures(
        station_id: str, day_type: DayType, entries: list[Any]
    ) -> list[Departure]:
        """Parse the departures of one day-type, in source order."""
        trains: list[Departure] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning(f"Station {station_id}: {day_type.value}[{index}] is not an object")
                continue
            try:
                trains.append(
                    Departure(
                        train_type=str(entry.get("type", "")),
                        destination=str(entry.get("destination", "")),
                        hour=_whole_number(entry["hour"], "hour"),
                        minute=_whole_number(entry["minute"], "minute"),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Station {station_id}: skipping {day_type.value}[{index}]: {e}")
        return trains


def _is_sorted(trains: list[Departure]) -> bool:
    keys = [(train.hour, train.minute) for train in trains]
    return keys == sorted(keys)


def _whole_number(value: Any, name: str) -> int:
    """Integer field value; booleans and fractional numbers are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(value)
