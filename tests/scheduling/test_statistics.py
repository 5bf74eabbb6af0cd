from datetime import date, timedelta

from app.services.scheduling.patterns import apply_pattern
from app.services.scheduling.statistics import (
    aggregate,
    monthly_statistics,
    statistics_for_range,
    yearly_statistics,
)
from app.services.scheduling.types import Assignment, CustomPattern, RotationPattern

from conftest import get_test_monday


class TestAggregate:
    def test_empty_range_is_all_zero(self):
        start = get_test_monday()
        stats = aggregate([], start, start + timedelta(days=6))

        assert stats.total_days == 0
        assert stats.work_days == 0
        assert stats.total_hours == 0.0
        assert stats.shift_distribution == {}
        assert stats.rest_days == 7
        assert stats.calendar_days == 7

    def test_overnight_shift_counts_eight_hours(self, night):
        day = get_test_monday()
        stats = aggregate([Assignment(date=day, shift=night)], day, day)

        assert stats.total_hours == 8.0
        assert stats.rest_days == 0

    def test_distribution_sums_to_total(self, early, late, night):
        start = get_test_monday()
        assignments = [
            Assignment(date=start, shift=early),
            Assignment(date=start + timedelta(days=1), shift=early),
            Assignment(date=start + timedelta(days=2), shift=late),
            Assignment(date=start + timedelta(days=4), shift=night),
        ]
        stats = aggregate(assignments, start, start + timedelta(days=6))

        assert stats.shift_distribution == {"Early": 2, "Late": 1, "Night": 1}
        assert sum(stats.shift_distribution.values()) == stats.total_days == 4
        assert stats.work_days == 4
        assert stats.rest_days == 3
        assert stats.total_hours == 32.0

    def test_out_of_range_assignments_ignored(self, early):
        start = get_test_monday()
        assignments = [
            Assignment(date=start - timedelta(days=1), shift=early),
            Assignment(date=start, shift=early),
            Assignment(date=start + timedelta(days=7), shift=early),
        ]
        stats = aggregate(assignments, start, start + timedelta(days=6))

        assert stats.total_days == 1
        assert stats.total_hours == 8.0

    def test_reversed_range_gives_zero_counts(self, early):
        start = get_test_monday()
        stats = aggregate([Assignment(date=start, shift=early)], start, start - timedelta(days=1))

        assert stats.total_days == 0
        assert stats.calendar_days == 0
        assert stats.rest_days == 0

    def test_hours_use_nominal_duration(self, early):
        day = get_test_monday()
        checked_in = Assignment(
            date=day, shift=early,
            actual_start_time=early.start_time, actual_end_time=early.start_time.replace(hour=18),
        )
        stats = aggregate([checked_in], day, day)

        assert stats.total_hours == 8.0

    def test_average_and_percentage(self, early, night):
        start = get_test_monday()
        assignments = [Assignment(date=start + timedelta(days=i), shift=early) for i in range(3)]
        assignments.append(Assignment(date=start + timedelta(days=3), shift=night))
        stats = aggregate(assignments, start, start + timedelta(days=3))

        assert stats.percentage_of("Early") == 75.0
        assert stats.percentage_of("Night") == 25.0
        assert stats.average_hours_per_work_day == 8.0


class TestStoreStatistics:
    def test_range_statistics_after_rotation(self, store):
        start = get_test_monday()
        end = start + timedelta(days=9)
        apply_pattern(store, RotationPattern(start_date=start, end_date=end, shift_ids=[1, 2, 3], rest_days=2))

        stats = statistics_for_range(store, start, end)

        assert stats.work_days == 6
        assert stats.rest_days == 4
        assert stats.shift_distribution == {"Early": 2, "Late": 2, "Night": 2}
        assert stats.total_hours == 48.0

    def test_monthly_uses_calendar_month(self, store):
        # 31 Jan + 1..3 Feb
        apply_pattern(store, CustomPattern(start_date=date(2025, 1, 31), end_date=date(2025, 2, 3), pattern=[1, 1, 2, 3]))

        february = monthly_statistics(store, 2025, 2)
        assert february.total_days == 3
        assert february.calendar_days == 28
        assert february.rest_days == 25

    def test_yearly_counts_leap_year(self, store):
        apply_pattern(store, CustomPattern(start_date=date(2024, 2, 28), end_date=date(2024, 3, 1), pattern=[1, 2, 3]))

        stats = yearly_statistics(store, 2024)
        assert stats.calendar_days == 366
        assert stats.total_days == 3
