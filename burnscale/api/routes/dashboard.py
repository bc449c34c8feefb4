import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, Query
from burnscale.api.deps import Authed
from burnscale.core.config import settings
from burnscale.repositories.checkin_repo import list_checkins_since
from burnscale.schemas.burnout import ZoneSummaryOut
from burnscale.schemas.dashboard import DashboardOut, TrendsOut
from burnscale.services.trends import daily_aggregates, trigger_totals, weekly_trends
from burnscale.services.zones import classify_zones
from burnscale.utils.time import coerce_window_days, window_start

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["trends"])

@router.get("/trends", response_model=TrendsOut)
async def trends(days: int | None = Query(default=None, ge=1), ctx=Depends(Authed)):
    days = coerce_window_days(days or settings.TRENDS_WINDOW_DAYS)
    rows = await list_checkins_since(ctx["db"], ctx["user_id"], window_start(days))
    return {"days": days, **asdict(weekly_trends(rows))}

@router.get("/user/dashboard", response_model=DashboardOut)
async def dashboard(days: int | None = Query(default=None, ge=1), ctx=Depends(Authed)):
    days = coerce_window_days(days or settings.TRENDS_WINDOW_DAYS)
    rows = await list_checkins_since(ctx["db"], ctx["user_id"], window_start(days))
    daily = daily_aggregates(rows)

    zone_summary = None
    if daily:
        zone_summary = ZoneSummaryOut.from_summary(classify_zones([d.avg_score for d in daily]))
    logger.info("Dashboard for user %s: %s check-ins over %s days", ctx["user_id"], len(rows), len(daily))

    return {
        "days": days,
        "daily": [asdict(d) for d in daily],
        "zone_summary": zone_summary,
        "trigger_counts": trigger_totals(daily),
    }
