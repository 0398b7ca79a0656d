"""Countdown update domain model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from rush_runner.domain.models.departure import Departure
from rush_runner.domain.models.session_context import CountdownState, SessionContext

SERVICE_ENDED_DISPLAY = "--:--"


class CountdownUpdate(BaseModel):
    """Display values emitted by one countdown tick.

    ``context`` is the session context to use for the next tick.
    """

    model_config = ConfigDict(frozen=True)

    context: SessionContext
    state: CountdownState
    display: str = SERVICE_ENDED_DISPLAY
    departure: Departure | None = None
    departure_time: datetime | None = None
    seconds_remaining: float | None = None
    refresh_timetable: bool = False

    @property
    def train_type(self) -> str | None:
        return self.departure.train_type if self.departure else None

    @property
    def destination(self) -> str | None:
        return self.departure.destination if self.departure else None

    @property
    def service_ended(self) -> bool:
        return self.state is CountdownState.ENDED
