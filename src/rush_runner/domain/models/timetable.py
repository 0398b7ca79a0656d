"""Timetable domain model."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rush_runner.domain.models.day_type import DayType
from rush_runner.domain.models.departure import Departure


def _sorted_by_time(departures: Iterable[Departure]) -> tuple[Departure, ...]:
    return tuple(sorted(departures, key=lambda departure: (departure.hour, departure.minute)))


@dataclass(frozen=True)
class Timetable:
    """Departures of one station per day-type, ascending by time of day.

    The ordering is enforced on construction; the resolver relies on it. The
    mapping is read-only for the lifetime of the timetable.
    """

    departures: Mapping[DayType, tuple[Departure, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(
            self,
            "departures",
            MappingProxyType(
                {day_type: _sorted_by_time(trains) for day_type, trains in self.departures.items()}
            ),
        )

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.departures.items(), key=lambda item: item[0].value)))

    def departures_for(self, day_type: DayType) -> tuple[Departure, ...]:
        """Departures for a day-type, empty when the day-type has no schedule."""
        return self.departures.get(day_type, ())

    def is_empty(self) -> bool:
        return not any(self.departures.values())
