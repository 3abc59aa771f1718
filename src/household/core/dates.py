#!/usr/bin/env python3
"""
Calendar Utilities

Pure Gregorian date arithmetic used by the recurrence engine and the ledger:
month keys, ISO (Monday-start) week windows, month windows and clamped
month/year addition.

All functions work on the local calendar fields of the instant they receive.
No timezone conversion happens here; an aware datetime keeps its tzinfo.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from .exceptions import ValidationError

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def as_datetime(value: date | datetime) -> datetime:
    """Promote a plain date to midnight; datetimes pass through unchanged."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date | datetime) -> datetime:
    """Midnight of the day containing `value`."""
    return as_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: date | datetime) -> datetime:
    """Last representable instant of the day containing `value`."""
    return as_datetime(value).replace(hour=23, minute=59, second=59, microsecond=999999)


@dataclass(frozen=True)
class DateRange:
    """Inclusive instant range `[start, end]`."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_datetime(self.start))
        object.__setattr__(self, "end", as_datetime(self.end))
        if self.start > self.end:
            raise ValidationError(f"Range start {self.start} is after end {self.end}")

    def contains(self, value: date | datetime) -> bool:
        """Check whether an instant lies within the range (bounds included)."""
        return self.start <= as_datetime(value) <= self.end

    def __contains__(self, value: date | datetime) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return f"{self.start.isoformat()} .. {self.end.isoformat()}"


def month_key(value: date | datetime) -> str:
    """
    Year-month key of a date.

    Example:
        month_key(date(2024, 3, 5)) -> "2024-03"
    """
    return f"{value.year:04d}-{value.month:02d}"


def parse_month_key(key: str) -> tuple[int, int]:
    """
    Split a "YYYY-MM" key into (year, month).

    Raises:
        ValidationError: If the key is malformed or the month is out of range
    """
    match = MONTH_KEY_PATTERN.match(key or "")
    if not match:
        raise ValidationError(f"Invalid month key {key!r}, expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month in key {key!r}")
    return year, month


def week_range(value: date | datetime) -> DateRange:
    """
    Monday 00:00 through Sunday 23:59:59.999999 of the week containing `value`.

    A Sunday belongs to the week that started the previous Monday; it is the
    end of that week, not the start of the next one.
    """
    day_start = start_of_day(value)
    monday = day_start - timedelta(days=day_start.weekday())
    sunday = monday + timedelta(days=6)
    return DateRange(start=monday, end=end_of_day(sunday))


def month_range(value: "str | date | datetime") -> DateRange:
    """
    First instant through last instant of a month.

    Args:
        value: A "YYYY-MM" key or any date/datetime inside the month
    """
    if isinstance(value, str):
        year, month = parse_month_key(value)
        first = datetime(year, month, 1)
    else:
        first = start_of_day(value).replace(day=1)
        year, month = first.year, first.month
    last_day = calendar.monthrange(year, month)[1]
    return DateRange(start=first, end=end_of_day(first.replace(day=last_day)))


def shift_month_key(key: str, months: int) -> str:
    """Move a "YYYY-MM" key by a number of months (negative goes back)."""
    year, month = parse_month_key(key)
    index = year * 12 + (month - 1) + months
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def previous_month_key(key: str) -> str:
    """The month before a "YYYY-MM" key."""
    return shift_month_key(key, -1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: datetime, months: int, day: int | None = None) -> datetime:
    """
    Add calendar months, clamping the day-of-month to the target month.

    Args:
        value: Starting instant (time of day is preserved)
        months: Months to add (may be negative)
        day: Preferred day-of-month; defaults to the day of `value`

    Examples:
        add_months(datetime(2023, 1, 31), 1) -> 2023-02-28
        add_months(datetime(2024, 1, 31), 1) -> 2024-02-29
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = index // 12, index % 12 + 1
    wanted = value.day if day is None else day
    return value.replace(year=year, month=month, day=min(wanted, days_in_month(year, month)))


def add_years(value: datetime, years: int, day: int | None = None) -> datetime:
    """Add calendar years; Feb 29 clamps to Feb 28 in non-leap years."""
    return add_months(value, years * 12, day=day)


def parse_instant(value: "str | date | datetime") -> datetime:
    """
    Parse a stored instant: ISO string, date or datetime.

    Raises:
        ValidationError: If a string is not ISO formatted
    """
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise ValidationError(f"Invalid ISO instant {value!r}") from e
    return as_datetime(value)
