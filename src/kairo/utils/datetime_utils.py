"""Calendar helpers shared by the habit, planner and analytics services.

All comparisons in the core happen at calendar-day granularity: a date-time is
reduced to the date portion it was written with, without timezone conversion.
Weekday indices follow the Sunday = 0 convention used by stored custom days.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Union

DateLike = Union[date, datetime, str]

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
WEEKDAY_ABBREVIATIONS = [name[:3] for name in WEEKDAY_NAMES]


def utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""

    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Return the current calendar day on the UTC clock used for audit stamps."""

    return utc_now().date()


def parse_datetime(value: DateLike) -> datetime:
    """Coerce ISO-8601 strings, dates and datetimes to a ``datetime``.

    Raises ``ValueError`` for strings that are not ISO-8601 and ``TypeError``
    for unsupported input types.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"Not an ISO-8601 date-time: {value!r}") from exc
    raise TypeError(f"Unsupported date value: {value!r}")


def to_day(value: DateLike) -> date:
    """Truncate a date-like value to its calendar day."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_datetime(value).date()


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(to_day(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    return datetime.combine(to_day(value), time.max)


def weekday_index(value: DateLike) -> int:
    """Return the weekday with Sunday = 0 through Saturday = 6."""

    return (to_day(value).weekday() + 1) % 7


def start_of_week(value: DateLike) -> datetime:
    """Return Sunday 00:00 of the week containing ``value``."""

    day = to_day(value)
    return start_of_day(day - timedelta(days=weekday_index(day)))


def end_of_week(value: DateLike) -> datetime:
    """Return Saturday 23:59:59.999999 of the week containing ``value``."""

    day = to_day(value)
    return end_of_day(day + timedelta(days=6 - weekday_index(day)))


def week_dates(value: DateLike) -> list[date]:
    """Return the seven calendar days (Sunday first) of the week containing ``value``."""

    first = start_of_week(value).date()
    return [first + timedelta(days=offset) for offset in range(7)]


def daterange(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield each calendar day from ``start`` through ``end`` inclusive."""

    cursor = to_day(start)
    last = to_day(end)
    while cursor <= last:
        yield cursor
        cursor += timedelta(days=1)


def is_within(value: DateLike, start: DateLike, end: DateLike | None = None) -> bool:
    """Return True when ``value`` falls on or between the days of ``start`` and ``end``."""

    day = to_day(value)
    if day < to_day(start):
        return False
    return end is None or day <= to_day(end)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def format_short_date(value: DateLike) -> str:
    """Format as ``"Mon, Jan 1"``."""

    day = to_day(value)
    return f"{WEEKDAY_ABBREVIATIONS[weekday_index(day)]}, {day:%b} {day.day}"


def format_time(value: DateLike) -> str:
    """Format as ``"1:00 PM"``."""

    moment = parse_datetime(value)
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_date_range(start: DateLike, end: DateLike) -> str:
    """Format a day range as ``"Jan 1 - 7, 2023"``.

    The start year is dropped when both ends share a year, and the end month is
    dropped when both ends share a month.
    """

    first = to_day(start)
    last = to_day(end)
    same_year = first.year == last.year
    same_month = same_year and first.month == last.month

    left = f"{first:%b} {first.day}" if same_year else f"{first:%b} {first.day}, {first.year}"
    right = f"{last.day}, {last.year}" if same_month else f"{last:%b} {last.day}, {last.year}"
    return f"{left} - {right}"


def time_ranges_overlap(
    start1: DateLike, end1: DateLike, start2: DateLike, end2: DateLike
) -> bool:
    """Return True when two half-open time ranges intersect."""

    return parse_datetime(start1) < parse_datetime(end2) and parse_datetime(
        end1
    ) > parse_datetime(start2)


__all__ = [
    "DateLike",
    "WEEKDAY_NAMES",
    "daterange",
    "days_in_month",
    "end_of_day",
    "end_of_week",
    "format_date_range",
    "format_short_date",
    "format_time",
    "is_within",
    "parse_datetime",
    "start_of_day",
    "start_of_week",
    "time_ranges_overlap",
    "to_day",
    "utc_now",
    "utc_today",
    "week_dates",
    "weekday_index",
]
