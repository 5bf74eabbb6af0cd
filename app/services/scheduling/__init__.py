"""
Roster scheduling package.

Usage:
    from datetime import date
    from app.services.scheduling import RotationPattern, SqlScheduleStore, apply_pattern

    store = SqlScheduleStore(db)
    pattern = RotationPattern(
        start_date=date(2025, 1, 1), end_date=date(2025, 3, 31),
        shift_ids=[1, 2, 3], rest_days=2,
    )
    result = apply_pattern(store, pattern)

    # Or expand without writing anything
    from app.services.scheduling import expand_pattern, aggregate

    result = expand_pattern(pattern, store.lookup_shift)
    stats = aggregate(result.assignments, pattern.start_date, pattern.end_date)
"""

from .types import (
    PRESET_COLORS,
    Shift,
    Assignment,
    SinglePattern,
    CyclePattern,
    RotationPattern,
    CustomPattern,
    SchedulePattern,
    SkipReason,
    SkippedDay,
    ExpansionResult,
    ScheduleStatistics,
)
from .exceptions import (
    SchedulingError,
    ShiftNotFound,
    InvalidPatternParameter,
    ShiftNameExists,
)
from .store import ScheduleStore, SqlScheduleStore
from .patterns import validate_pattern, expand_pattern, apply_pattern
from .statistics import (
    aggregate,
    statistics_for_range,
    monthly_statistics,
    yearly_statistics,
)

__all__ = [
    # Types
    "PRESET_COLORS",
    "Shift",
    "Assignment",
    "SinglePattern",
    "CyclePattern",
    "RotationPattern",
    "CustomPattern",
    "SchedulePattern",
    "SkipReason",
    "SkippedDay",
    "ExpansionResult",
    "ScheduleStatistics",
    # Errors
    "SchedulingError",
    "ShiftNotFound",
    "InvalidPatternParameter",
    "ShiftNameExists",
    # Storage
    "ScheduleStore",
    "SqlScheduleStore",
    # Main entry points
    "apply_pattern",
    "aggregate",
    # Lower-level functions
    "validate_pattern",
    "expand_pattern",
    "statistics_for_range",
    "monthly_statistics",
    "yearly_statistics",
]
