"""Formatter for rush alert messages."""

import math

from rush_runner.domain.models.rush_alert import RushAlert, RushTier

ENABLE_LOCATION_MESSAGE = "Turn on location to find out if you can make it"


class RushAlertFormatter:
    """Turns rush alerts into one-line messages."""

    def format_alert(self, alert: RushAlert) -> str:
        """Format an alert as the message shown to the rider."""
        if alert.tier is RushTier.UNKNOWN or alert.assessment is None:
            return ENABLE_LOCATION_MESSAGE
        if alert.tier is RushTier.SAFE:
            minutes = self._ceil_minutes(alert.assessment.eta_walk_seconds)
            return f"🚶 Plenty of time (about {minutes} min walk to the station)"
        if alert.tier is RushTier.WARNING:
            minutes = self._ceil_minutes(alert.assessment.eta_run_seconds)
            return f"🏃 You might make it if you run (about {minutes} min running)"
        return "😭 Better aim for the next train…"

    @staticmethod
    def _ceil_minutes(seconds: float) -> int:
        return math.ceil(seconds / 60)
