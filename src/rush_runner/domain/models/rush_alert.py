"""Rush alert domain models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RushTier(str, Enum):
    """How urgently the rider has to move to catch the next departure."""

    SAFE = "safe"  # Walking gets there with a minute to spare
    WARNING = "warning"  # Only running gets there
    DANGER = "danger"  # Not reachable, aim for the next train
    UNKNOWN = "unknown"  # No position available, classification skipped


class RushAssessment(BaseModel):
    """Result of classifying a distance against a time budget."""

    model_config = ConfigDict(frozen=True)

    tier: RushTier
    eta_walk_seconds: float
    eta_run_seconds: float


class RushAlert(BaseModel):
    """Rush alert for one session context.

    Carries the generation of the context it was requested for so that late
    results can be recognised as stale.
    """

    model_config = ConfigDict(frozen=True)

    tier: RushTier
    generation: int
    assessment: RushAssessment | None = None
    distance_meters: float | None = None
    seconds_until_departure: float | None = None
    reason: str | None = None  # Why the position was unavailable (UNKNOWN only)
