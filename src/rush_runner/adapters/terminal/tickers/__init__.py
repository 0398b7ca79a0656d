"""Tickers driving periodic updates."""

from rush_runner.adapters.terminal.tickers.countdown_ticker import CountdownTicker

__all__ = ["CountdownTicker"]
