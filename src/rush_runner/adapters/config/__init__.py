"""Configuration adapters."""

from rush_runner.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
