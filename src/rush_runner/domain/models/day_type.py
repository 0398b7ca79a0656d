"""Day-type domain model."""

from datetime import date
from enum import Enum


class DayType(str, Enum):
    """Schedule variant selected by calendar weekday."""

    WEEKDAY = "weekday"
    HOLIDAY = "holiday"


def day_type_for(day: date) -> DayType:
    """Return the day-type that applies to a calendar date.

    Saturday and Sunday run the holiday schedule, every other day the weekday one.
    """
    # date.weekday(): Monday == 0 ... Saturday == 5, Sunday == 6
    if day.weekday() >= 5:
        return DayType.HOLIDAY
    return DayType.WEEKDAY
