"""Pydantic response models for API endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    display_timezone: str  # "local" when unset
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class TimeTableEntryResponse(BaseModel):
    """Single formatted entry of a day."""

    time_range: str
    description: str
    project_id: int | str | None = None
    color: str


class TimeTableDayResponse(BaseModel):
    """Entries sharing one calendar date."""

    date: str  # YYYY-MM-DD
    entries: list[TimeTableEntryResponse] = []


class TimeTableWeekResponse(BaseModel):
    """Day buckets in first-seen order."""

    days: list[TimeTableDayResponse] = []


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
