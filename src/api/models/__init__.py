"""API Pydantic models."""

from .requests import ProjectRequest, TimeEntryRequest, TimeTableRequest
from .responses import (
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
    TimeTableDayResponse,
    TimeTableEntryResponse,
    TimeTableWeekResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "ProjectRequest",
    "TimeEntryRequest",
    "TimeTableRequest",
    "TimeTableDayResponse",
    "TimeTableEntryResponse",
    "TimeTableWeekResponse",
]
