import logging
from fastapi import APIRouter, Depends, HTTPException
from burnscale.api.deps import Authed
from burnscale.core.config import settings
from burnscale.repositories.checkin_repo import list_checkins_since
from burnscale.repositories.moodboard_repo import create_moodboard, list_moodboards
from burnscale.schemas.ai import (
    MoodBoardList, MoodBoardOut, NotesAnalysisIn, NotesAnalysisOut, StressTipsOut, TipsOut, TriggersIn,
)
from burnscale.services.ai import AIServiceError, analyze_notes, coping_tips, generate_image, stress_tips, weekly_summary
from burnscale.services.burnout import distinct_triggers
from burnscale.utils.time import window_start

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ai"])

def _require_triggers(payload: TriggersIn) -> list[str]:
    triggers = distinct_triggers(payload.triggers)
    if not triggers:
        raise HTTPException(status_code=400, detail="No triggers provided.")
    return triggers

@router.post("/ai/moodboard", response_model=MoodBoardOut, status_code=201)
async def moodboard(ctx=Depends(Authed)):
    db = ctx["db"]
    user_id = ctx["user_id"]
    rows = await list_checkins_since(db, user_id, window_start(settings.TRENDS_WINDOW_DAYS))
    if not rows:
        raise HTTPException(status_code=404, detail=f"No check-ins for the past {settings.TRENDS_WINDOW_DAYS} days.")
    try:
        summary = await weekly_summary(rows)
    except AIServiceError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    image_url = await generate_image(summary["image_prompt"])
    mb = await create_moodboard(db, user_id, {**summary, "image_url": image_url})
    return MoodBoardOut.model_validate(mb)

@router.get("/moodboards", response_model=MoodBoardList)
async def moodboards(limit: int = 20, ctx=Depends(Authed)):
    rows = await list_moodboards(ctx["db"], ctx["user_id"], limit)
    return {"moodboards": [MoodBoardOut.model_validate(r) for r in rows]}

@router.post("/ai/stress-tips", response_model=StressTipsOut)
async def tips_markdown(payload: TriggersIn, ctx=Depends(Authed)):
    triggers = _require_triggers(payload)
    try:
        return {"advice": await stress_tips(triggers)}
    except AIServiceError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

@router.post("/ai/tips", response_model=TipsOut)
async def tips_list(payload: TriggersIn, ctx=Depends(Authed)):
    triggers = _require_triggers(payload)
    try:
        return {"tips": await coping_tips(triggers)}
    except AIServiceError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

@router.post("/ai/notes-analysis", response_model=NotesAnalysisOut)
async def notes_analysis(payload: NotesAnalysisIn, ctx=Depends(Authed)):
    if not payload.notes or not payload.notes.strip():
        raise HTTPException(status_code=400, detail="No notes provided.")
    try:
        return await analyze_notes(payload.notes.strip())
    except AIServiceError as e:
        logger.warning("Notes analysis failed for user %s: %s", ctx["user_id"], e)
        raise HTTPException(status_code=502, detail=str(e)) from e
