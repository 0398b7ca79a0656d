"""Formatters for terminal output."""

from rush_runner.adapters.terminal.formatters.countdown_formatter import CountdownFormatter
from rush_runner.adapters.terminal.formatters.rush_alert_formatter import (
    ENABLE_LOCATION_MESSAGE,
    RushAlertFormatter,
)

__all__ = ["ENABLE_LOCATION_MESSAGE", "CountdownFormatter", "RushAlertFormatter"]
