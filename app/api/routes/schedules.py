from typing import List
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_store, DateRange
from app.schemas.schedules import ScheduleUpsert, ScheduleResponse, ClearRangeResponse
from app.schemas.statistics import DataCountsResponse
from app.services.scheduling.store import SqlScheduleStore
from app.services.scheduling.types import Assignment

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.get("", response_model=List[ScheduleResponse])
def list_schedules(
    date_range: DateRange = Depends(),
    store: SqlScheduleStore = Depends(get_store),
):
    assignments = store.query_assignments(date_range.start_date, date_range.end_date)
    return [ScheduleResponse.model_validate(a) for a in assignments]


@router.delete("", response_model=ClearRangeResponse)
def clear_schedules(
    date_range: DateRange = Depends(),
    store: SqlScheduleStore = Depends(get_store),
):
    """Remove every assignment in the range"""
    deleted = store.clear_range(date_range.start_date, date_range.end_date)
    return ClearRangeResponse(deleted=deleted)


@router.get("/counts", response_model=DataCountsResponse)
def get_data_counts(
    store: SqlScheduleStore = Depends(get_store),
):
    return store.data_counts()


@router.delete("/all", status_code=status.HTTP_204_NO_CONTENT)
def clear_all_data(
    store: SqlScheduleStore = Depends(get_store),
):
    """Wipe every assignment and every shift definition"""
    store.clear_all()


@router.get("/{day}", response_model=ScheduleResponse)
def get_schedule(
    day: date,
    store: SqlScheduleStore = Depends(get_store),
):
    assignment = store.get_assignment(day)
    if not assignment:
        raise HTTPException(status_code=404, detail="No schedule for this date")
    return ScheduleResponse.model_validate(assignment)


@router.put("/{day}", response_model=ScheduleResponse)
def put_schedule(
    day: date,
    payload: ScheduleUpsert,
    store: SqlScheduleStore = Depends(get_store),
):
    """Create or overwrite the assignment for one date"""
    shift = store.lookup_shift(payload.shift_id)
    if not shift:
        raise HTTPException(status_code=404, detail="Shift not found")

    store.upsert_assignments([
        Assignment(
            date=day,
            shift=shift,
            note=payload.note,
            actual_start_time=payload.actual_start_time,
            actual_end_time=payload.actual_end_time,
        )
    ])
    return ScheduleResponse.model_validate(store.get_assignment(day))


@router.delete("/{day}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule(
    day: date,
    store: SqlScheduleStore = Depends(get_store),
):
    if not store.delete_assignment(day):
        raise HTTPException(status_code=404, detail="No schedule for this date")
