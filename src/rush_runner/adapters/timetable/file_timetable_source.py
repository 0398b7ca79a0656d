"""Timetable source reading a local JSON file."""

import json
import logging
from pathlib import Path

from rush_runner.adapters.timetable.timetable_parser import TimetableParser
from rush_runner.domain.errors import TimetableLoadError
from rush_runner.domain.models.station import Station

logger = logging.getLogger(__name__)


class FileTimetableSource:
    """Loads stations from a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def description(self) -> str:
        return str(self.path)

    async def load(self) -> dict[str, Station]:
        """Load all stations from the file.

        Raises:
            TimetableLoadError: If the file is missing, unreadable or malformed.
        """
        if not self.path.exists():
            raise TimetableLoadError(self.description, "file not found")

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            stations = TimetableParser.parse(data)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            raise TimetableLoadError(self.description, str(e)) from e

        logger.info(f"Loaded {len(stations)} station(s) from {self.description}")
        return stations
