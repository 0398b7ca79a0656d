"""Resolution result domain model."""

from dataclasses import dataclass

from rush_runner.domain.models.day_type import DayType
from rush_runner.domain.models.departure import Departure


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of looking up the next departure relative to a timestamp."""

    departure: Departure | None  # None: no more service reachable
    day_type_changed: bool = False
    new_day_type: DayType | None = None  # Only set when day_type_changed
    day_type: DayType | None = None  # Day-type whose schedule produced the departure

    @property
    def has_departure(self) -> bool:
        return self.departure is not None


NO_DEPARTURE = ResolutionResult(departure=None)
