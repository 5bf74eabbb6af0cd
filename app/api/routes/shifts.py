from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.config import settings
from app.schemas.shifts import ShiftCreate, ShiftUpdate, ShiftResponse
from app.services.scheduling import registry
from app.services.scheduling.exceptions import ShiftNameExists, ShiftNotFound

router = APIRouter(prefix="/shifts", tags=["shifts"])


@router.post("", response_model=ShiftResponse, status_code=status.HTTP_201_CREATED)
def create_shift(
    payload: ShiftCreate,
    db: Session = Depends(get_db),
):
    try:
        return registry.create_shift(db, payload)
    except ShiftNameExists as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("", response_model=List[ShiftResponse])
def list_shifts(
    include_inactive: bool = False,
    db: Session = Depends(get_db),
):
    return registry.list_shifts(db, active_only=not include_inactive)


@router.get("/quick", response_model=List[ShiftResponse])
def list_quick_shifts(
    limit: int = settings.QUICK_SHIFT_LIMIT,
    db: Session = Depends(get_db),
):
    """Most-used shifts for one-tap assignment (currently: oldest active ones)"""
    return registry.quick_shifts(db, limit)


@router.get("/{shift_id}", response_model=ShiftResponse)
def get_shift(
    shift_id: int,
    db: Session = Depends(get_db),
):
    try:
        return registry.get_shift(db, shift_id)
    except ShiftNotFound:
        raise HTTPException(status_code=404, detail="Shift not found")


@router.put("/{shift_id}", response_model=ShiftResponse)
def update_shift(
    shift_id: int,
    payload: ShiftUpdate,
    db: Session = Depends(get_db),
):
    try:
        return registry.update_shift(db, shift_id, payload)
    except ShiftNotFound:
        raise HTTPException(status_code=404, detail="Shift not found")
    except ShiftNameExists as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{shift_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shift(
    shift_id: int,
    db: Session = Depends(get_db),
):
    try:
        registry.delete_shift(db, shift_id)
    except ShiftNotFound:
        raise HTTPException(status_code=404, detail="Shift not found")
