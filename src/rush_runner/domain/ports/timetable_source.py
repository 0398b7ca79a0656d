"""Timetable source port."""

from typing import Protocol

from rush_runner.domain.models.station import Station


class TimetableSource(Protocol):
    """Port for loading station timetables once at startup."""

    @property
    def description(self) -> str:
        """Human readable origin of the data (path or URL)."""
        ...

    async def load(self) -> dict[str, Station]:
        """Load all stations keyed by station id.

        Raises:
            TimetableLoadError: If the data cannot be read or parsed.
        """
        ...
