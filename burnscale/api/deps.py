from uuid import UUID
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from burnscale.db.session import get_db
from burnscale.core.security import get_current_user

def Authed(db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    return {"db": db, "user_id": UUID(str(user["user_id"]))}
