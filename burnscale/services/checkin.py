from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from burnscale.repositories.checkin_repo import create_checkin as repo_create_checkin
from burnscale.services.burnout import compute_burnout_score, distinct_triggers, parse_mood
from burnscale.services.zones import Zone, zone_for, FALLBACK_THRESHOLDS

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CheckinResult:
    checkin_id: UUID
    created_at: datetime
    burnout_score: int
    zone: Zone


async def create_checkin(
    db: AsyncSession,
    *,
    user_id: UUID,
    mood: str,
    energy_level: int,
    meaningfulness: int,
    stress_triggers: Optional[Iterable[str]] = None,
    recovery_activities: Optional[Iterable[str]] = None,
    notes: Optional[str] = None,
) -> CheckinResult:
    """
    Scores and stores a new check-in.
    - The score is computed once here; check-ins are never re-scored.
    - Raises InvalidInput before touching the database if any value is out of range.
    """
    mood_value = parse_mood(mood).value
    triggers = distinct_triggers(stress_triggers)
    score = compute_burnout_score(mood_value, energy_level, meaningfulness, len(triggers))

    ci = await repo_create_checkin(db, user_id, {
        "mood": mood_value,
        "energy_level": energy_level,
        "meaningfulness": meaningfulness,
        "stress_triggers": triggers,
        "recovery_activities": distinct_triggers(recovery_activities),
        "notes": notes.strip() if notes and notes.strip() else None,
        "burnout_score": score,
    })
    log.info("Stored check-in %s for user %s with burnout score %s", ci.id, user_id, score)

    return CheckinResult(
        checkin_id=ci.id,
        created_at=ci.created_at,
        burnout_score=score,
        # A single check-in has no population; place it on the fixed scale
        zone=zone_for(score, FALLBACK_THRESHOLDS),
    )
