"""Selects the timetable source from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rush_runner.adapters.timetable.file_timetable_source import FileTimetableSource
from rush_runner.adapters.timetable.http_timetable_source import HttpTimetableSource

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from rush_runner.adapters.config.app_config import AppConfig
    from rush_runner.domain.ports.timetable_source import TimetableSource


def create_timetable_source(
    config: AppConfig, session: ClientSession | None = None
) -> TimetableSource:
    """Create the timetable source: the URL when configured, otherwise the file.

    Raises:
        ValueError: If neither a URL nor a file is configured.
    """
    if config.timetable_url:
        return HttpTimetableSource(
            config.timetable_url,
            session=session,
            timeout_seconds=config.http_timeout_seconds,
        )
    if config.timetable_file:
        return FileTimetableSource(config.timetable_file)
    raise ValueError("Either timetable_url or timetable_file must be configured")
