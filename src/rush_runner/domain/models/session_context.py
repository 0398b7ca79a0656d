"""Session context domain model."""

from dataclasses import dataclass
from enum import Enum

from rush_runner.domain.models.day_type import DayType


class CountdownState(str, Enum):
    """Lifecycle of the countdown for the selected station."""

    IDLE = "idle"  # No station selected
    RUNNING = "running"  # Ticking towards a departure
    ENDED = "ended"  # No further departures; inactive until a new selection


@dataclass(frozen=True)
class SessionContext:
    """The single active selection of a rider session.

    Passed into and returned from every engine operation instead of living in
    ambient mutable fields. ``generation`` grows on every user selection so
    that asynchronous results can be matched to the context that asked for them.
    """

    day_type: DayType
    station_id: str | None = None
    state: CountdownState = CountdownState.IDLE
    generation: int = 0
