import asyncio
import logging
from sqlalchemy import text
from burnscale.db.session import engine
from burnscale.db.models import Base

logger = logging.getLogger(__name__)

async def init_db():
    """Create the app schema and all tables"""
    try:
        async with engine.begin() as conn:
            await conn.execute(text("CREATE SCHEMA IF NOT EXISTS app"))
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database: %s", e)
        raise

if __name__ == "__main__":
    asyncio.run(init_db())
