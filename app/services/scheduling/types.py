"""
Internal data types for roster logic.
decoupled from SQLAlchemy models for cleaner logic.
"""

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Optional, Union

from .dates import duration_hours


PRESET_COLORS = [
    0xFF4CAF50,  # green - early
    0xFF2196F3,  # blue - middle
    0xFF9C27B0,  # purple - late
    0xFFFF9800,  # orange - special
    0xFFF44336,  # red - overtime
]


@dataclass
class Shift:
    """A reusable named time-of-day window."""
    id: int
    name: str
    start_time: time
    end_time: time
    color: int = PRESET_COLORS[0]
    description: Optional[str] = None
    is_active: bool = True

    @property
    def duration(self) -> float:
        return duration_hours(self.start_time, self.end_time)

    @property
    def is_overnight(self) -> bool:
        return self.end_time < self.start_time

    @property
    def time_range_text(self) -> str:
        return f"{self.start_time:%H:%M} - {self.end_time:%H:%M}"


@dataclass
class Assignment:
    """A single date's resolved shift."""
    date: date
    shift: Shift
    note: Optional[str] = None
    actual_start_time: Optional[time] = None
    actual_end_time: Optional[time] = None
    id: Optional[int] = None

    @property
    def is_checked_in(self) -> bool:
        return self.actual_start_time is not None or self.actual_end_time is not None

    @property
    def actual_work_hours(self) -> Optional[float]:
        if self.actual_start_time is None or self.actual_end_time is None:
            return None
        return duration_hours(self.actual_start_time, self.actual_end_time)


# ---------- Patterns ----------

@dataclass
class SinglePattern:
    date: date
    shift_id: int


@dataclass
class CyclePattern:
    """
    Repeat a cycle of cycle_days days from start_date.
    cycle_pattern maps 0-based offset in the cycle -> shift id (None/missing = rest).
    """
    start_date: date
    end_date: date
    cycle_days: int
    cycle_pattern: dict[int, Optional[int]] = field(default_factory=dict)

    @classmethod
    def from_weekly(
        cls,
        start_date: date,
        end_date: date,
        week_pattern: dict[int, Optional[int]],
    ) -> "CyclePattern":
        """
        Build a 7-day cycle from a weekday map (Monday=0 .. Sunday=6).
        Offsets are shifted so each weekday lands on the matching calendar day
        whatever weekday start_date falls on.
        """
        first = start_date.weekday()
        return cls(
            start_date=start_date,
            end_date=end_date,
            cycle_days=7,
            cycle_pattern={(weekday - first) % 7: shift_id for weekday, shift_id in week_pattern.items()},
        )


@dataclass
class RotationPattern:
    """Work shift_ids in order, then rest_days off after each full pass."""
    start_date: date
    end_date: date
    shift_ids: list[int]
    rest_days: int = 0


@dataclass
class CustomPattern:
    """One entry per day from start_date; None = rest. Stops at the end of the list."""
    start_date: date
    end_date: date
    pattern: list[Optional[int]]


SchedulePattern = Union[SinglePattern, CyclePattern, RotationPattern, CustomPattern]


# ---------- Expansion output ----------

class SkipReason(str, Enum):
    REST = "REST"
    SHIFT_NOT_FOUND = "SHIFT_NOT_FOUND"


@dataclass
class SkippedDay:
    date: date
    reason: SkipReason
    shift_id: Optional[int] = None


@dataclass
class ExpansionResult:
    """Output of expanding a pattern."""
    assignments: list[Assignment] = field(default_factory=list)
    skipped: list[SkippedDay] = field(default_factory=list)

    @property
    def unresolved(self) -> list[SkippedDay]:
        return [s for s in self.skipped if s.reason == SkipReason.SHIFT_NOT_FOUND]


# ---------- Statistics ----------

@dataclass
class ScheduleStatistics:
    total_days: int = 0
    work_days: int = 0
    rest_days: int = 0
    shift_distribution: dict[str, int] = field(default_factory=dict)  # shift name -> days
    total_hours: float = 0.0
    calendar_days: int = 0

    @property
    def average_hours_per_work_day(self) -> float:
        if self.work_days == 0:
            return 0.0
        return self.total_hours / self.work_days

    def percentage_of(self, shift_name: str) -> float:
        if self.total_days == 0:
            return 0.0
        return self.shift_distribution.get(shift_name, 0) * 100.0 / self.total_days
