"""
Statistics aggregator.
Reduces the assignments of a date range to a ScheduleStatistics record.
"""

from collections import Counter
from datetime import date

from .dates import days_between, month_bounds, year_bounds
from .store import ScheduleStore
from .types import Assignment, ScheduleStatistics


def aggregate(assignments: list[Assignment], start_date: date, end_date: date) -> ScheduleStatistics:
    """
    Aggregate assignments dated within [start_date, end_date].

    Every stored assignment is a work day; rest days are the calendar days of
    the range that have no assignment. Hours use each shift's nominal
    duration, not the actual clock-in/out times.

    Never raises: an empty list (or an empty range) gives zero counts.
    """
    in_range = [a for a in assignments if start_date <= a.date <= end_date]
    calendar_days = days_between(start_date, end_date)

    work_days = len(in_range)
    distribution = Counter(a.shift.name for a in in_range)

    return ScheduleStatistics(
        total_days=work_days,
        work_days=work_days,
        rest_days=max(calendar_days - work_days, 0),
        shift_distribution=dict(distribution),
        total_hours=sum((a.shift.duration for a in in_range), 0.0),
        calendar_days=calendar_days,
    )


def statistics_for_range(store: ScheduleStore, start_date: date, end_date: date) -> ScheduleStatistics:
    return aggregate(store.query_assignments(start_date, end_date), start_date, end_date)


def monthly_statistics(store: ScheduleStore, year: int, month: int) -> ScheduleStatistics:
    return statistics_for_range(store, *month_bounds(year, month))


def yearly_statistics(store: ScheduleStore, year: int) -> ScheduleStatistics:
    return statistics_for_range(store, *year_bounds(year))
