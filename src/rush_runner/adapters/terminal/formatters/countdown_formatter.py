"""Formatter for countdown values."""

from datetime import timedelta

from rush_runner.domain.contracts.countdown_formatter import CountdownFormatterProtocol
from rush_runner.domain.models.departure import Departure


class CountdownFormatter(CountdownFormatterProtocol):
    """Formats remaining time and departure times for display."""

    def format_countdown(self, delta: timedelta) -> str:
        """Format remaining time as '1h5m' (one hour or more) or '04:09'."""
        total_seconds = max(int(delta.total_seconds()), 0)
        hours = total_seconds // 3600
        minutes = (total_seconds // 60) % 60
        seconds = total_seconds % 60
        if hours > 0:
            return f"{hours}h{minutes}m"
        return f"{minutes:02d}:{seconds:02d}"

    def format_departure_time(self, departure: Departure) -> str:
        """Format departure time as absolute (HH:MM format)."""
        return f"{departure.hour:02d}:{departure.minute:02d}"
