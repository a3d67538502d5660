"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field


class TimeEntryRequest(BaseModel):
    """Detailed report item as sent by the client."""

    start: str  # ISO 8601
    end: str  # ISO 8601
    description: str = ""
    project_id: int | str | None = None


class ProjectRequest(BaseModel):
    """Project directory entry."""

    id: int | str
    color: str | None = None


class TimeTableRequest(BaseModel):
    """Time table generation request body."""

    time_entries: list[TimeEntryRequest] = []
    projects: list[ProjectRequest] = []
    timezone: str | None = Field(
        None, description="IANA timezone. Defaults to the server's DISPLAY_TIMEZONE."
    )
