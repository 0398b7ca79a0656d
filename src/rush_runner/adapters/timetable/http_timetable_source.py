"""Timetable source fetching the stations JSON over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp

from rush_runner.adapters.timetable.timetable_parser import TimetableParser
from rush_runner.domain.errors import TimetableLoadError

if TYPE_CHECKING:
    from rush_runner.domain.models.station import Station

logger = logging.getLogger(__name__)


class HttpTimetableSource:
    """Loads stations from a JSON document served over HTTP."""

    def __init__(
        self,
        url: str,
        session: aiohttp.ClientSession | None = None,
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize the source.

        Args:
            url: URL of the stations JSON.
            session: Optional shared aiohttp session; a private one is used otherwise.
            timeout_seconds: Total request timeout.
        """
        self.url = url
        self._session = session
        self.timeout_seconds = timeout_seconds

    @property
    def description(self) -> str:
        return self.url

    async def load(self) -> dict[str, Station]:
        """Fetch and parse all stations.

        Raises:
            TimetableLoadError: On HTTP errors, timeouts or malformed data.
        """
        if self._session is not None:
            return await self._fetch(self._session)
        async with aiohttp.ClientSession() as session:
            return await self._fetch(session)

    async def _fetch(self, session: aiohttp.ClientSession) -> dict[str, Station]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        headers = {"accept": "application/json"}
        try:
            async with session.get(self.url, headers=headers, timeout=timeout) as response:
                if response.status != 200:
                    response_text = await response.text()
                    logger.warning(
                        f"Timetable source returned status {response.status}: {response_text[:200]}"
                    )
                    raise TimetableLoadError(self.url, f"HTTP {response.status}")
                # Static hosts often serve JSON as text/plain
                data = await response.json(content_type=None)
        except TimetableLoadError:
            raise
        except asyncio.TimeoutError as e:
            raise TimetableLoadError(self.url, "request timed out") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise TimetableLoadError(self.url, str(e)) from e

        try:
            stations = TimetableParser.parse(data)
        except ValueError as e:
            raise TimetableLoadError(self.url, str(e)) from e

        logger.info(f"Loaded {len(stations)} station(s) from {self.url}")
        return stations
