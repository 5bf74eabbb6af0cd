from pydantic import BaseModel
from datetime import date


class StatisticsResponse(BaseModel):
    start_date: date
    end_date: date
    total_days: int
    work_days: int
    rest_days: int
    calendar_days: int
    shift_distribution: dict[str, int]
    total_hours: float
    average_hours_per_work_day: float


class DataCountsResponse(BaseModel):
    shifts: int
    schedules: int
