"""
Shift registry: CRUD for shift definitions.
Names are unique among active shifts; delete is a soft delete.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models.shifts import Shifts
from app.schemas.shifts import ShiftCreate, ShiftUpdate

from .exceptions import ShiftNameExists, ShiftNotFound


logger = logging.getLogger(__name__)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def is_name_taken(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Shifts.id).where(Shifts.name == name, Shifts.is_active == True)
    if exclude_id is not None:
        stmt = stmt.where(Shifts.id != exclude_id)
    return db.execute(stmt).first() is not None


def list_shifts(db: Session, active_only: bool = True) -> list[Shifts]:
    stmt = select(Shifts)
    if active_only:
        stmt = stmt.where(Shifts.is_active == True)
    return list(db.scalars(stmt.order_by(Shifts.start_time, Shifts.id)))


def quick_shifts(db: Session, limit: int) -> list[Shifts]:
    """First `limit` active shifts in creation order, for one-tap assignment."""
    stmt = (
        select(Shifts)
        .where(Shifts.is_active == True)
        .order_by(Shifts.created_at, Shifts.id)
        .limit(limit)
    )
    return list(db.scalars(stmt))


def get_shift(db: Session, shift_id: int) -> Shifts:
    shift = db.get(Shifts, shift_id)
    if not shift:
        raise ShiftNotFound(shift_id)
    return shift


def create_shift(db: Session, payload: ShiftCreate) -> Shifts:
    if is_name_taken(db, payload.name):
        raise ShiftNameExists(payload.name)

    shift = Shifts(**payload.model_dump(), is_active=True)
    db.add(shift)
    _commit(db)
    db.refresh(shift)
    logger.info(f"Created shift {shift.id} '{shift.name}'")
    return shift


def update_shift(db: Session, shift_id: int, payload: ShiftUpdate) -> Shifts:
    shift = get_shift(db, shift_id)

    update_data = payload.model_dump(exclude_unset=True)
    new_name = update_data.get("name")
    if new_name is not None and new_name != shift.name and is_name_taken(db, new_name, exclude_id=shift_id):
        raise ShiftNameExists(new_name)

    for field, value in update_data.items():
        setattr(shift, field, value)

    _commit(db)
    db.refresh(shift)
    logger.info(f"Updated shift {shift.id}")
    return shift


def delete_shift(db: Session, shift_id: int) -> None:
    """Soft delete. Existing assignments keep pointing at the shift."""
    shift = get_shift(db, shift_id)
    shift.is_active = False
    _commit(db)
    logger.info(f"Deactivated shift {shift_id}")
