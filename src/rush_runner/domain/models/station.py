"""Station domain model."""

from dataclasses import dataclass, field

from rush_runner.domain.models.timetable import Timetable


@dataclass(frozen=True)
class Station:
    """Represents a train station with its timetable."""

    id: str
    name: str
    line_name: str
    latitude: float
    longitude: float
    timetable: Timetable = field(default_factory=Timetable)
