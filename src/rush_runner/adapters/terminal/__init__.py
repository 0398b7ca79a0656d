"""Terminal adapters for displaying the dashboard."""

from rush_runner.adapters.terminal.dashboard import Dashboard
from rush_runner.adapters.terminal.terminal_display import TerminalDisplay

__all__ = ["Dashboard", "TerminalDisplay"]
