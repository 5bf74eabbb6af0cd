from datetime import date
from fastapi import APIRouter, Depends, Path

from app.api.deps import get_store, DateRange
from app.schemas.statistics import StatisticsResponse
from app.services.scheduling.dates import month_bounds, week_bounds, year_bounds
from app.services.scheduling.statistics import statistics_for_range
from app.services.scheduling.store import SqlScheduleStore

router = APIRouter(prefix="/statistics", tags=["statistics"])


def _build_response(store: SqlScheduleStore, start_date: date, end_date: date) -> StatisticsResponse:
    stats = statistics_for_range(store, start_date, end_date)
    return StatisticsResponse(
        start_date=start_date,
        end_date=end_date,
        total_days=stats.total_days,
        work_days=stats.work_days,
        rest_days=stats.rest_days,
        calendar_days=stats.calendar_days,
        shift_distribution=stats.shift_distribution,
        total_hours=stats.total_hours,
        average_hours_per_work_day=stats.average_hours_per_work_day,
    )


@router.get("", response_model=StatisticsResponse)
def get_statistics(
    date_range: DateRange = Depends(),
    store: SqlScheduleStore = Depends(get_store),
):
    return _build_response(store, date_range.start_date, date_range.end_date)


@router.get("/weekly/{day}", response_model=StatisticsResponse)
def get_weekly_statistics(
    day: date,
    store: SqlScheduleStore = Depends(get_store),
):
    """Monday to Sunday week containing day"""
    return _build_response(store, *week_bounds(day))


@router.get("/monthly/{year}/{month}", response_model=StatisticsResponse)
def get_monthly_statistics(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    store: SqlScheduleStore = Depends(get_store),
):
    return _build_response(store, *month_bounds(year, month))


@router.get("/yearly/{year}", response_model=StatisticsResponse)
def get_yearly_statistics(
    year: int = Path(..., ge=1, le=9999),
    store: SqlScheduleStore = Depends(get_store),
):
    return _build_response(store, *year_bounds(year))
