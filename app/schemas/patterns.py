from pydantic import BaseModel, Field
from datetime import date
from typing import Annotated, Literal, Optional, Union

from app.services.scheduling.types import (
    CustomPattern,
    CyclePattern,
    RotationPattern,
    SinglePattern,
    SkipReason,
)


class SinglePatternIn(BaseModel):
    type: Literal["single"]
    date: date
    shift_id: int

    def to_pattern(self) -> SinglePattern:
        return SinglePattern(date=self.date, shift_id=self.shift_id)


class CyclePatternIn(BaseModel):
    type: Literal["cycle"]
    start_date: date
    end_date: date
    cycle_days: int
    cycle_pattern: dict[int, Optional[int]] = {}

    def to_pattern(self) -> CyclePattern:
        return CyclePattern(
            start_date=self.start_date,
            end_date=self.end_date,
            cycle_days=self.cycle_days,
            cycle_pattern=dict(self.cycle_pattern),
        )


class WeeklyPatternIn(BaseModel):
    """Weekday (Monday=0) -> shift id; expanded as a 7-day cycle."""
    type: Literal["weekly"]
    start_date: date
    end_date: date
    week_pattern: dict[int, Optional[int]] = {}

    def to_pattern(self) -> CyclePattern:
        return CyclePattern.from_weekly(self.start_date, self.end_date, dict(self.week_pattern))


class RotationPatternIn(BaseModel):
    type: Literal["rotation"]
    start_date: date
    end_date: date
    shift_ids: list[int]
    rest_days: int = 0

    def to_pattern(self) -> RotationPattern:
        return RotationPattern(
            start_date=self.start_date,
            end_date=self.end_date,
            shift_ids=list(self.shift_ids),
            rest_days=self.rest_days,
        )


class CustomPatternIn(BaseModel):
    type: Literal["custom"]
    start_date: date
    end_date: date
    pattern: list[Optional[int]]

    def to_pattern(self) -> CustomPattern:
        return CustomPattern(
            start_date=self.start_date,
            end_date=self.end_date,
            pattern=list(self.pattern),
        )


PatternRequest = Annotated[
    Union[SinglePatternIn, CyclePatternIn, WeeklyPatternIn, RotationPatternIn, CustomPatternIn],
    Field(discriminator="type"),
]


class SkippedDayResponse(BaseModel):
    date: date
    reason: SkipReason
    shift_id: Optional[int] = None

    class Config:
        from_attributes = True


class PatternApplyResponse(BaseModel):
    written: int
    skipped: list[SkippedDayResponse]
