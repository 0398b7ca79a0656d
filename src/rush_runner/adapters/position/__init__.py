"""Position provider adapters."""

from rush_runner.adapters.position.static_position_provider import StaticPositionProvider

__all__ = ["StaticPositionProvider"]
