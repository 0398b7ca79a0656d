"""Position provider port."""

from typing import Protocol

from rush_runner.domain.models.position import Position


class PositionProvider(Protocol):
    """Port for obtaining the rider's current position."""

    async def get_position(self) -> Position:
        """Get a fresh position fix.

        Raises:
            PositionUnavailableError: If no fix can be obtained.
        """
        ...
