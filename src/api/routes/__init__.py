"""API route modules."""

from .health import router as health_router
from .timetable import router as timetable_router

__all__ = ["health_router", "timetable_router"]
