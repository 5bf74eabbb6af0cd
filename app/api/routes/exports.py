from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_store, DateRange
from app.services.export import to_csv, to_json, statistics_report
from app.services.scheduling.statistics import aggregate
from app.services.scheduling.store import SqlScheduleStore

router = APIRouter(prefix="/exports", tags=["exports"])


@router.get("/csv", response_class=PlainTextResponse)
def export_csv(
    date_range: DateRange = Depends(),
    store: SqlScheduleStore = Depends(get_store),
):
    assignments = store.query_assignments(date_range.start_date, date_range.end_date)
    return PlainTextResponse(
        to_csv(assignments, date_range.start_date, date_range.end_date),
        media_type="text/csv",
    )


@router.get("/json", response_class=PlainTextResponse)
def export_json(
    date_range: DateRange = Depends(),
    store: SqlScheduleStore = Depends(get_store),
):
    assignments = store.query_assignments(date_range.start_date, date_range.end_date)
    stats = aggregate(assignments, date_range.start_date, date_range.end_date)
    return PlainTextResponse(
        to_json(assignments, stats, date_range.start_date, date_range.end_date),
        media_type="application/json",
    )


@router.get("/report", response_class=PlainTextResponse)
def export_report(
    date_range: DateRange = Depends(),
    store: SqlScheduleStore = Depends(get_store),
):
    assignments = store.query_assignments(date_range.start_date, date_range.end_date)
    stats = aggregate(assignments, date_range.start_date, date_range.end_date)
    return PlainTextResponse(statistics_report(stats, date_range.start_date, date_range.end_date))
