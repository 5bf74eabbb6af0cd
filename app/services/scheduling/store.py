"""
Schedule store.
The expander and statistics only see the ScheduleStore protocol; SqlScheduleStore
implements it over the SQLAlchemy models and converts rows to internal types.
"""

from datetime import date
from typing import Optional, Protocol

from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models.shifts import Shifts
from app.db.models.schedules import Schedules

from .types import Assignment, Shift


class ScheduleStore(Protocol):
    def lookup_shift(self, shift_id: int) -> Optional[Shift]:
        ...

    def upsert_assignments(self, assignments: list[Assignment]) -> None:
        ...

    def query_assignments(self, start_date: date, end_date: date) -> list[Assignment]:
        ...


def to_shift(row: Shifts) -> Shift:
    return Shift(
        id=row.id,
        name=row.name,
        start_time=row.start_time,
        end_time=row.end_time,
        color=row.color,
        description=row.description,
        is_active=row.is_active,
    )


def to_assignment(row: Schedules) -> Assignment:
    return Assignment(
        id=row.id,
        date=row.date,
        shift=to_shift(row.shift),
        note=row.note,
        actual_start_time=row.actual_start_time,
        actual_end_time=row.actual_end_time,
    )


class SqlScheduleStore:
    """ScheduleStore backed by the shifts/schedules tables."""

    def __init__(self, db: Session):
        self.db = db

    def lookup_shift(self, shift_id: int) -> Optional[Shift]:
        row = self.db.get(Shifts, shift_id)
        return to_shift(row) if row else None

    def upsert_assignments(self, assignments: list[Assignment]) -> None:
        """Insert or replace one row per date, committing the batch once."""
        if not assignments:
            return

        dates = {a.date for a in assignments}
        stmt = select(Schedules).where(Schedules.date.in_(dates))
        existing = {row.date: row for row in self.db.execute(stmt).scalars()}

        for assignment in assignments:
            row = existing.get(assignment.date)
            if row is None:
                row = Schedules(date=assignment.date)
                self.db.add(row)
                existing[assignment.date] = row
            row.shift_id = assignment.shift.id
            row.note = assignment.note
            row.actual_start_time = assignment.actual_start_time
            row.actual_end_time = assignment.actual_end_time

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def query_assignments(self, start_date: date, end_date: date) -> list[Assignment]:
        stmt = (
            select(Schedules)
            .where(Schedules.date >= start_date, Schedules.date <= end_date)
            .order_by(Schedules.date)
        )
        return [to_assignment(row) for row in self.db.execute(stmt).scalars()]

    def get_assignment(self, day: date) -> Optional[Assignment]:
        row = self.db.execute(select(Schedules).where(Schedules.date == day)).scalar_one_or_none()
        return to_assignment(row) if row else None

    def delete_assignment(self, day: date) -> bool:
        result = self.db.execute(delete(Schedules).where(Schedules.date == day))
        self.db.commit()
        return result.rowcount > 0

    def clear_range(self, start_date: date, end_date: date) -> int:
        result = self.db.execute(
            delete(Schedules).where(Schedules.date >= start_date, Schedules.date <= end_date)
        )
        self.db.commit()
        return result.rowcount

    def clear_all(self) -> None:
        self.db.execute(delete(Schedules))
        self.db.execute(delete(Shifts))
        self.db.commit()

    def data_counts(self) -> dict[str, int]:
        shift_count = self.db.scalar(select(func.count()).select_from(Shifts).where(Shifts.is_active == True))
        schedule_count = self.db.scalar(select(func.count()).select_from(Schedules))
        return {"shifts": shift_count or 0, "schedules": schedule_count or 0}
