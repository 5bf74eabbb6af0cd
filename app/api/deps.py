from datetime import date
from typing import Generator
from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.database import SessionLocal
from app.services.scheduling.store import SqlScheduleStore


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> SqlScheduleStore:
    return SqlScheduleStore(db)


class DateRange:
    """Query-string date range shared by list, statistics and export routes."""
    def __init__(
        self,
        start_date: date = Query(...),
        end_date: date = Query(...),
    ):
        if end_date < start_date:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="end_date must not be before start_date",
            )
        self.start_date = start_date
        self.end_date = end_date
