"""Rush runner: station timetable countdown with rush alerts."""

__version__ = "0.1.0"
