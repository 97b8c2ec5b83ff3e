"""Health check endpoint: reports version, environment and database reachability."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.config import get_settings
from catalog_api.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db_session)) -> dict:
    """Returns the current application health status.

    The endpoint itself always answers 200; ``database`` is ``"unavailable"``
    when the store cannot be queried.
    """
    settings = get_settings()
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", exc)
        database = "unavailable"
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": database,
    }
