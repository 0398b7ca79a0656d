"""Position provider returning configured coordinates."""

import logging

from rush_runner.domain.errors import PositionUnavailableError
from rush_runner.domain.models.position import Position

logger = logging.getLogger(__name__)

LOCATION_DISABLED_REASON = "location is not configured"


class StaticPositionProvider:
    """Provides a fixed position, e.g. from LATITUDE/LONGITUDE settings.

    Without coordinates every request fails the way a denied location
    permission would.
    """

    def __init__(self, latitude: float | None = None, longitude: float | None = None) -> None:
        self.latitude = latitude
        self.longitude = longitude

    async def get_position(self) -> Position:
        """Return the configured position.

        Raises:
            PositionUnavailableError: If no coordinates are configured.
        """
        if self.latitude is None or self.longitude is None:
            raise PositionUnavailableError(LOCATION_DISABLED_REASON)
        return Position(latitude=self.latitude, longitude=self.longitude)
