from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from supabase import Client  # noqa: TCH002

from organizer.config import settings
from organizer.dependencies import get_client
from organizer.utils.logging import get_logger

router = APIRouter()

logger = get_logger(__name__)


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "notes-organizer-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check(client: Client = Depends(get_client)):
    """Readiness check endpoint; probes the `projects` table."""
    db_status = "connected"
    try:
        await asyncio.to_thread(lambda: client.table("projects").select("id").limit(1).execute())
    except Exception as e:
        logger.warning("Readiness probe failed: %s", e)
        db_status = "error"

    return JSONResponse(
        status_code=status.HTTP_200_OK if db_status == "connected" else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if db_status == "connected" else "degraded",
            "database": db_status,
            "api_prefix": settings.api_prefix
        }
    )
