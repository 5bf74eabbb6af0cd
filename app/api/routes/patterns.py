from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_store
from app.core.config import settings
from app.schemas.patterns import PatternRequest, PatternApplyResponse, SkippedDayResponse
from app.services.scheduling.exceptions import InvalidPatternParameter, ShiftNotFound
from app.services.scheduling.patterns import apply_pattern
from app.services.scheduling.store import SqlScheduleStore

router = APIRouter(prefix="/patterns", tags=["patterns"])


@router.post("/apply", response_model=PatternApplyResponse)
def apply_schedule_pattern(
    payload: PatternRequest,
    store: SqlScheduleStore = Depends(get_store),
):
    """Expand a pattern over its date range and save the resulting assignments"""
    try:
        result = apply_pattern(store, payload.to_pattern(), max_days=settings.MAX_PATTERN_DAYS)
    except ShiftNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidPatternParameter as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return PatternApplyResponse(
        written=len(result.assignments),
        skipped=[SkippedDayResponse.model_validate(s) for s in result.skipped],
    )
