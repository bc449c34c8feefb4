from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from burnscale.db.models import UserCustomization
from uuid import UUID

async def list_customizations(db: AsyncSession, user_id: UUID) -> list[UserCustomization]:
    res = await db.execute(select(UserCustomization).where(UserCustomization.user_id == user_id))
    return list(res.scalars())

async def set_customization(db: AsyncSession, user_id: UUID, type_: str, value: str, is_active: bool) -> None:
    """Insert the option or flip its active flag if the user already has it."""
    stmt = insert(UserCustomization).values(user_id=user_id, type=type_, value=value, is_active=is_active)
    stmt = stmt.on_conflict_do_update(
        constraint="uq_user_customizations_user_type_value",
        set_={"is_active": stmt.excluded.is_active},
    )
    await db.execute(stmt)
    await db.commit()
