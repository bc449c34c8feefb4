from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from burnscale.db.models import CheckIn
from uuid import UUID
from datetime import datetime

async def create_checkin(db: AsyncSession, user_id: UUID, values: dict) -> CheckIn:
    ci = CheckIn(
        user_id=user_id,
        mood=values["mood"],
        energy_level=values["energy_level"],
        meaningfulness=values["meaningfulness"],
        stress_triggers=values["stress_triggers"],
        recovery_activities=values["recovery_activities"],
        notes=values.get("notes"),
        burnout_score=values["burnout_score"],
    )
    db.add(ci)
    await db.commit()
    await db.refresh(ci)
    return ci

async def list_checkins_since(db: AsyncSession, user_id: UUID, since: datetime) -> list[CheckIn]:
    # created_at is TIMESTAMP WITHOUT TIME ZONE
    since_naive = since.replace(tzinfo=None) if since.tzinfo else since
    q = (
        select(CheckIn)
        .where(CheckIn.user_id == user_id, CheckIn.created_at >= since_naive)
        .order_by(CheckIn.created_at.asc())
    )
    res = await db.execute(q)
    return list(res.scalars())
