from fastapi import APIRouter, Depends, HTTPException
from burnscale.api.deps import Authed
from burnscale.schemas.burnout import ScoreIn, ScoreOut, ZonesIn, ZoneSummaryOut
from burnscale.services.burnout import score_checkin
from burnscale.services.zones import FALLBACK_THRESHOLDS, classify_zones, zone_for

router = APIRouter(prefix="/api/burnout", tags=["burnout"])

@router.post("/score", response_model=ScoreOut)
async def preview_score(payload: ScoreIn, ctx=Depends(Authed)):
    """Score a check-in without storing it."""
    score = score_checkin(payload.mood, payload.energy_level, payload.meaningfulness, payload.stress_triggers)
    return {"burnout_score": score, "zone": zone_for(score, FALLBACK_THRESHOLDS).value}

@router.post("/zones", response_model=ZoneSummaryOut)
async def zones(payload: ZonesIn, ctx=Depends(Authed)):
    if not payload.scores:
        raise HTTPException(status_code=400, detail="No scores provided")
    return ZoneSummaryOut.from_summary(classify_zones(payload.scores))
