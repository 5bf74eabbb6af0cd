"""
Date and duration helpers shared by the pattern expander and statistics.
"""

import calendar
from datetime import date, time, timedelta
from typing import Iterator

SECONDS_PER_DAY = 24 * 60 * 60


def _seconds_of_day(t: time) -> int:
    return t.hour * 3600 + t.minute * 60 + t.second


def duration_hours(start: time, end: time) -> float:
    """Hours from start to end, wrapping past midnight when end is earlier."""
    start_s = _seconds_of_day(start)
    end_s = _seconds_of_day(end)
    if end_s < start_s:
        end_s += SECONDS_PER_DAY
    return (end_s - start_s) / 3600


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end inclusive. Empty if end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def days_between(start: date, end: date) -> int:
    """Inclusive number of days in [start, end], 0 if the range is empty."""
    return max((end - start).days + 1, 0)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def week_bounds(day: date) -> tuple[date, date]:
    """Monday..Sunday of the week containing day."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)
