"""Timetable store domain model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rush_runner.domain.models.station import Station


class TimetableStore:
    """Read-only lookup of stations (and their timetables) by station id.

    Keeps the insertion order of the source so that "the first station" is stable.
    """

    def __init__(self, stations: Mapping[str, Station] | None = None) -> None:
        self._stations: dict[str, Station] = dict(stations or {})

    def get(self, station_id: str | None) -> Station | None:
        """Get a station by id, or None when unknown."""
        if station_id is None:
            return None
        return self._stations.get(station_id)

    def station_ids(self) -> list[str]:
        return list(self._stations)

    def first_station_id(self) -> str | None:
        return next(iter(self._stations), None)

    def search(self, query: str) -> list[Station]:
        """Find stations whose display name contains the query (case-insensitive).

        An empty query matches nothing.
        """
        needle = query.strip().lower()
        if not needle:
            return []
        return [station for station in self._stations.values() if needle in station.name.lower()]

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._stations
