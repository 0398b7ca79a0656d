"""Timetable source adapters."""

from rush_runner.adapters.timetable.file_timetable_source import FileTimetableSource
from rush_runner.adapters.timetable.http_timetable_source import HttpTimetableSource
from rush_runner.adapters.timetable.source_factory import create_timetable_source
from rush_runner.adapters.timetable.timetable_parser import TimetableParser

__all__ = [
    "FileTimetableSource",
    "HttpTimetableSource",
    "TimetableParser",
    "create_timetable_source",
]
