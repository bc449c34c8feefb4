from fastapi import APIRouter, Depends, Query
from burnscale.api.deps import Authed
from burnscale.core.config import settings
from burnscale.schemas.checkin import CheckinCreate, CheckinCreated, CheckinList, CheckinOut
from burnscale.repositories.checkin_repo import list_checkins_since
from burnscale.services.checkin import create_checkin
from burnscale.utils.time import coerce_window_days, window_start

router = APIRouter(prefix="/api/checkins", tags=["checkins"])

@router.post("", response_model=CheckinCreated, status_code=201)
async def create(payload: CheckinCreate, ctx=Depends(Authed)):
    # InvalidInput from scoring is mapped to 422 by the app-level handler
    result = await create_checkin(
        ctx["db"],
        user_id=ctx["user_id"],
        mood=payload.mood,
        energy_level=payload.energy_level,
        meaningfulness=payload.meaningfulness,
        stress_triggers=payload.stress_triggers,
        recovery_activities=payload.recovery_activities,
        notes=payload.notes,
    )
    return {
        "checkin_id": result.checkin_id,
        "created_at": result.created_at,
        "burnout_score": result.burnout_score,
        "zone": result.zone.value,
    }

@router.get("", response_model=CheckinList)
async def list_recent(days: int | None = Query(default=None, ge=1), ctx=Depends(Authed)):
    days = coerce_window_days(days or settings.TRENDS_WINDOW_DAYS)
    rows = await list_checkins_since(ctx["db"], ctx["user_id"], window_start(days))
    return {"days": days, "checkins": [CheckinOut.model_validate(r) for r in rows]}
