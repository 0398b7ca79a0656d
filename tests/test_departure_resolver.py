"""Tests for departure resolution."""

from datetime import date, datetime, timedelta

import pytest

from rush_runner.application.services import resolve_next
from rush_runner.domain.models import DayType, Departure, Station, Timetable, day_type_for

MONDAY = date(2024, 1, 15)


def dep(hour: int, minute: int, destination: str = "Seaside", train_type: str = "Local") -> Departure:
    """Create a departure."""
    return Departure(train_type=train_type, destination=destination, hour=hour, minute=minute)


def make_timetable(
    weekday: list[Departure] | None = None, holiday: list[Departure] | None = None
) -> Timetable:
    """Create a timetable; omitted day-types have no schedule at all."""
    departures: dict[DayType, tuple[Departure, ...]] = {}
    if weekday is not None:
        departures[DayType.WEEKDAY] = tuple(weekday)
    if holiday is not None:
        departures[DayType.HOLIDAY] = tuple(holiday)
    return Timetable(departures)


def make_station(
    station_id: str = "central",
    weekday: list[Departure] | None = None,
    holiday: list[Departure] | None = None,
    latitude: float = 35.0,
    longitude: float = 139.0,
) -> Station:
    """Create a station with a timetable."""
    return Station(
        id=station_id,
        name=station_id.title(),
        line_name="Harbor Line",
        latitude=latitude,
        longitude=longitude,
        timetable=make_timetable(weekday, holiday),
    )


@pytest.fixture
def timetable() -> Timetable:
    """A small weekday/holiday timetable."""
    return make_timetable(
        weekday=[dep(5, 12), dep(6, 5, train_type="Rapid"), dep(12, 30), dep(23, 10, "Harbor Park")],
        holiday=[dep(6, 0), dep(22, 45, "Harbor Park")],
    )


def test_returns_first_departure_after_now(timetable: Timetable) -> None:
    """Given departures later today, when resolving, then the earliest later one is returned."""
    result = resolve_next(timetable, DayType.WEEKDAY, datetime(2024, 1, 15, 6, 0))

    assert result.departure == dep(6, 5, train_type="Rapid")
    assert result.day_type_changed is False
    assert result.new_day_type is None
    assert result.day_type == DayType.WEEKDAY


def test_departure_exactly_at_now_counts_as_departed(timetable: Timetable) -> None:
    """Given a departure at exactly now, when resolving, then the following departure is returned."""
    now = datetime(2024, 1, 15, 6, 5)

    result = resolve_next(timetable, DayType.WEEKDAY, now)

    assert result.departure == dep(12, 30)


def test_exact_boundary_is_deterministic(timetable: Timetable) -> None:
    """Given the same timestamp, when resolving twice, then the same departure is returned."""
    now = datetime(2024, 1, 15, 12, 30)

    assert resolve_next(timetable, DayType.WEEKDAY, now) == resolve_next(
        timetable, DayType.WEEKDAY, now
    )


def test_departure_in_current_minute_with_seconds_elapsed_is_skipped(timetable: Timetable) -> None:
    """Given now is a few seconds after a departure minute, when resolving, then that train is gone."""
    now = datetime(2024, 1, 15, 5, 12, 30)

    result = resolve_next(timetable, DayType.WEEKDAY, now)

    assert result.departure == dep(6, 5, train_type="Rapid")


def test_one_second_before_departure_selects_it(timetable: Timetable) -> None:
    """Given now is one second before a departure, when resolving, then that departure is next."""
    now = datetime(2024, 1, 15, 5, 11, 59)

    result = resolve_next(timetable, DayType.WEEKDAY, now)

    assert result.departure == dep(5, 12)


def test_after_last_train_rolls_to_first_train_of_same_day_type(timetable: Timetable) -> None:
    """Given Monday after the last train, when resolving, then Tuesday's first weekday train is returned."""
    now = datetime(2024, 1, 15, 23, 59)

    result = resolve_next(timetable, DayType.WEEKDAY, now)

    assert result.departure == dep(5, 12)
    assert result.day_type_changed is False
    assert result.new_day_type is None


def test_friday_after_last_train_rolls_to_holiday(timetable: Timetable) -> None:
    """Given Friday 23:59 with no trains left, when resolving, then Saturday's holiday schedule is used."""
    now = datetime(2024, 1, 19, 23, 59)

    result = resolve_next(timetable, DayType.WEEKDAY, now)

    assert result.departure == dep(6, 0)
    assert result.day_type_changed is True
    assert result.new_day_type == DayType.HOLIDAY
    assert result.day_type == DayType.HOLIDAY


def test_sunday_after_last_train_rolls_to_weekday(timetable: Timetable) -> None:
    """Given Sunday 23:59 with no trains left, when resolving, then Monday's weekday schedule is used."""
    now = datetime(2024, 1, 21, 23, 59)

    result = resolve_next(timetable, DayType.HOLIDAY, now)

    assert result.departure == dep(5, 12)
    assert result.day_type_changed is True
    assert result.new_day_type == DayType.WEEKDAY


@pytest.mark.parametrize("offset", range(7))
def test_rollover_is_calendar_correct_for_every_weekday(offset: int) -> None:
    """Given 23:59 on any weekday with no trains left, when resolving, then tomorrow's day-type is used."""
    today = MONDAY + timedelta(days=offset)
    tomorrow = today + timedelta(days=1)
    current = day_type_for(today)
    expected = day_type_for(tomorrow)
    timetable = make_timetable(
        weekday=[dep(5, 0, "Weekday Town")], holiday=[dep(7, 0, "Holiday Town")]
    )

    now = datetime(today.year, today.month, today.day, 23, 59)

    result = resolve_next(timetable, current, now)

    expected_destination = "Weekday Town" if expected == DayType.WEEKDAY else "Holiday Town"
    assert result.departure is not None
    assert result.departure.destination == expected_destination
    assert result.day_type_changed is (expected != current)
    assert result.new_day_type == (expected if expected != current else None)


def test_rollover_takes_only_the_first_train_of_next_day() -> None:
    """Given no trains left today, when resolving, then the first train of tomorrow is returned, not a later one."""
    timetable = make_timetable(weekday=[dep(1, 0), dep(5, 0), dep(9, 0)])

    result = resolve_next(timetable, DayType.WEEKDAY, datetime(2024, 1, 16, 23, 30))

    assert result.departure == dep(1, 0)


def test_single_midnight_entry_in_other_day_type_flags_change() -> None:
    """Given only a 00:00 holiday train and Friday evening, when resolving, then the change is flagged."""
    timetable = make_timetable(weekday=[], holiday=[dep(0, 0, "Night Owl")])

    result = resolve_next(timetable, DayType.WEEKDAY, datetime(2024, 1, 19, 23, 59))

    assert result.departure == dep(0, 0, "Night Owl")
    assert result.day_type_changed is True
    assert result.new_day_type == DayType.HOLIDAY


def test_empty_day_type_and_no_next_day_data_returns_absent() -> None:
    """Given an empty schedule and no schedule for tomorrow, when resolving, then no departure is returned."""
    timetable = make_timetable(weekday=[])

    result = resolve_next(timetable, DayType.WEEKDAY, datetime(2024, 1, 19, 10, 0))

    assert result.departure is None
    assert result.has_departure is False
    assert result.day_type_changed is False
    assert result.new_day_type is None


def test_next_day_type_empty_returns_absent_without_change() -> None:
    """Given Friday after the last train and an empty holiday schedule, when resolving, then nothing is found."""
    timetable = make_timetable(weekday=[dep(5, 0)], holiday=[])

    result = resolve_next(timetable, DayType.WEEKDAY, datetime(2024, 1, 19, 23, 0))

    assert result.departure is None
    assert result.day_type_changed is False


def test_missing_timetable_returns_absent() -> None:
    """Given no timetable at all, when resolving, then no departure is returned and nothing raises."""
    result = resolve_next(None, DayType.WEEKDAY, datetime(2024, 1, 15, 8, 0))

    assert result.departure is None


def test_unsorted_source_still_yields_earliest_departure() -> None:
    """Given departures listed out of order, when resolving, then the earliest later departure is returned."""
    timetable = make_timetable(weekday=[dep(18, 0), dep(7, 0), dep(12, 0)])

    result = resolve_next(timetable, DayType.WEEKDAY, datetime(2024, 1, 15, 6, 0))

    assert result.departure == dep(7, 0)


@pytest.mark.parametrize("minute_of_day", [0, 1, 359, 360, 361, 600, 1439])
def test_result_is_earliest_departure_strictly_after_now(minute_of_day: int) -> None:
    """Given a sorted timetable, when resolving at any minute, then the result is the earliest strictly later train."""
    trains = [dep(h, m) for h, m in [(0, 30), (6, 0), (6, 1), (10, 0), (23, 59)]]
    timetable = make_timetable(weekday=trains, holiday=trains)
    now = datetime(2024, 1, 16, minute_of_day // 60, minute_of_day % 60)

    result = resolve_next(timetable, DayType.WEEKDAY, now)

    later = [train for train in trains if train.at(now.date()) > now]
    expected = later[0] if later else trains[0]
    assert result.departure == expected
