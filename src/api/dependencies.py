"""FastAPI dependencies for authentication and request-scoped settings."""

import secrets
from datetime import tzinfo
from zoneinfo import ZoneInfoNotFoundError

from fastapi import Header, HTTPException, status

from api.models.responses import ErrorCodes
from core.config import TIMETABLE_API_KEY
from services.timetable import get_display_timezone


def error_detail(error: str, code: str, details: list[str] | None = None) -> dict:
    """Build the standard error payload used in HTTPException details."""
    return {"error": error, "code": code, "details": details or []}


async def verify_api_key(
    x_api_key: str | None = Header(None, alias="X-API-Key"),
) -> str:
    """
    Verify API key from X-API-Key header.

    Raises:
        HTTPException: 500 if no key is configured, 401 if missing or invalid
    """
    if not TIMETABLE_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail("API key not configured on server", ErrorCodes.INTERNAL_ERROR),
        )

    # Constant-time comparison
    if not x_api_key or not secrets.compare_digest(x_api_key, TIMETABLE_API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_detail("Invalid or missing API key", ErrorCodes.UNAUTHORIZED),
        )

    return x_api_key


def resolve_request_timezone(name: str | None) -> tzinfo | None:
    """
    Resolve a client-supplied timezone, falling back to the server setting.

    Raises:
        HTTPException: 422 if the zone name is unknown
    """
    try:
        return get_display_timezone(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=error_detail(
                "Unknown timezone",
                ErrorCodes.VALIDATION_ERROR,
                [f"Received: {name}"],
            ),
        )
