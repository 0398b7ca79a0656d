"""Display adapter port."""

from abc import ABC, abstractmethod

from rush_runner.domain.models.countdown_update import CountdownUpdate
from rush_runner.domain.models.day_type import DayType
from rush_runner.domain.models.error_details import ErrorDetails
from rush_runner.domain.models.rush_alert import RushAlert
from rush_runner.domain.models.station import Station


class DisplayAdapter(ABC):
    """Port for presenting timetable, countdown and rush alerts to the rider."""

    @abstractmethod
    async def show_station(self, station: Station) -> None:
        """Show the selected station's name and line."""
        ...

    @abstractmethod
    async def show_timetable(self, station: Station, day_type: DayType) -> None:
        """Show the station's schedule for a day-type."""
        ...

    @abstractmethod
    async def show_countdown(self, update: CountdownUpdate) -> None:
        """Show one countdown tick."""
        ...

    @abstractmethod
    async def show_rush_alert(self, alert: RushAlert | None) -> None:
        """Show a rush alert, or hide it when None."""
        ...

    @abstractmethod
    async def show_error(self, details: ErrorDetails) -> None:
        """Show an error state."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
