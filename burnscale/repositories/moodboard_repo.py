from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from burnscale.db.models import MoodBoard
from uuid import UUID

async def create_moodboard(db: AsyncSession, user_id: UUID, payload: dict) -> MoodBoard:
    mb = MoodBoard(
        user_id=user_id,
        summary=payload["summary"],
        prompt=payload["image_prompt"],
        image_url=payload.get("image_url") or "",
        personal_reflection=payload.get("personal_reflection"),
    )
    db.add(mb)
    await db.commit()
    await db.refresh(mb)
    return mb

async def list_moodboards(db: AsyncSession, user_id: UUID, limit: int = 20) -> list[MoodBoard]:
    q = (
        select(MoodBoard)
        .where(MoodBoard.user_id == user_id)
        .order_by(MoodBoard.created_at.desc())
        .limit(limit)
    )
    res = await db.execute(q)
    return list(res.scalars())
