"""Health check endpoint."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfoNotFoundError

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, DISPLAY_TIMEZONE
from services.timetable import get_display_timezone

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if the configured display timezone is unknown.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    display_timezone = DISPLAY_TIMEZONE or "local"

    try:
        get_display_timezone(DISPLAY_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                display_timezone=display_timezone,
                timestamp=timestamp,
                error=f"Unknown display timezone: {DISPLAY_TIMEZONE}",
            ).model_dump(),
        )

    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        display_timezone=display_timezone,
        timestamp=timestamp,
    )
