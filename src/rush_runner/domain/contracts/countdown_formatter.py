"""Protocol for formatting countdown values."""

from datetime import timedelta
from typing import Protocol

from rush_runner.domain.models.departure import Departure


class CountdownFormatterProtocol(Protocol):
    """Protocol for formatting remaining time and departure times."""

    def format_countdown(self, delta: timedelta) -> str:
        """Format the time left until a departure.

        Args:
            delta: Non-negative time until the departure.

        Returns:
            "{hours}h{minutes}m" when at least one hour remains, otherwise "MM:SS".
        """
        ...

    def format_departure_time(self, departure: Departure) -> str:
        """Format a departure's scheduled time.

        Args:
            departure: The departure to format.

        Returns:
            Absolute time string like "05:07".
        """
        ...
