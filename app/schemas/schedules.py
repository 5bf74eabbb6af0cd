from pydantic import BaseModel, Field
from datetime import date, time
from typing import Optional


class ShiftSummary(BaseModel):
    id: int
    name: str
    start_time: time
    end_time: time
    color: int
    duration: float
    time_range_text: str

    class Config:
        from_attributes = True


class ScheduleUpsert(BaseModel):
    shift_id: int
    note: Optional[str] = Field(default=None, max_length=500)
    actual_start_time: Optional[time] = None
    actual_end_time: Optional[time] = None


class ScheduleResponse(BaseModel):
    id: Optional[int]
    date: date
    shift: ShiftSummary
    note: Optional[str]
    actual_start_time: Optional[time]
    actual_end_time: Optional[time]
    is_checked_in: bool
    actual_work_hours: Optional[float]

    class Config:
        from_attributes = True


class ClearRangeResponse(BaseModel):
    deleted: int
