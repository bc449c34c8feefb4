'''
Liveness and database connectivity checks.
'''
import logging
import os
from datetime import datetime, timezone
from urllib.parse import urlparse
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from burnscale.db.session import get_db
from burnscale.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE_NAME = "burnscale-api"

def mask_password(url: str) -> str:
    try:
        parsed = urlparse(url)
    except ValueError:
        return "<unparseable>"
    if parsed.password:
        return url.replace(f":{parsed.password}@", ":***@", 1)
    return url

@router.get("/health")
async def health():
    """
    Liveness probe; does not touch the database.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "message": "API is running",
        "service": SERVICE_NAME
    }

@router.get("/health/simple")
async def health_simple():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "message": "API is running"
    }

@router.get("/health/full")
async def health_full(db: AsyncSession = Depends(get_db)):
    """
    Verifies both API and database connectivity.
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "unknown",
        "service": SERVICE_NAME
    }

    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar()
        health_status["database"] = "connected"
        logger.info("Database health check successful")
    except Exception as e:
        logger.error("Database health check failed: %s", str(e))
        health_status["status"] = "unhealthy"
        health_status["database"] = "disconnected"
        health_status["error"] = str(e)

    return health_status

@router.get("/health/debug")
async def health_debug():
    """Database URL configuration with credentials masked"""
    from burnscale.db import session as db_session

    try:
        engine_url = db_session.engine.url.render_as_string(hide_password=True)
    except Exception as e:
        logger.warning("Unable to read engine URL: %s", e)
        engine_url = "Unable to retrieve engine URL"

    return {
        "original_database_url": mask_password(str(settings.DATABASE_URL)),
        "engine_database_url": engine_url,
        "app_env": settings.APP_ENV,
        "render_service": os.environ.get("RENDER_SERVICE_NAME", "unknown"),
        "render_region": os.environ.get("RENDER_REGION", "unknown"),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
