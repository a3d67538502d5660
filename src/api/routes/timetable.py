"""Time table generation endpoints."""

import asyncio
import time
from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response

from api.dependencies import error_detail, resolve_request_timezone, verify_api_key
from api.logging import RequestLog, log_request
from api.models.requests import TimeTableRequest
from api.models.responses import ErrorCodes, TimeTableWeekResponse
from models.timetable import TimeTableWeek
from services.reports import timetable_excel_to_bytes
from services.timetable import TimeTableView

router = APIRouter(prefix="/v1")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def build_week(body: TimeTableRequest, tz: tzinfo | None) -> TimeTableWeek:
    """
    Run the time table over a request body.

    Raises:
        ValueError: If a timestamp cannot be parsed
    """
    time_entries = [entry.model_dump() for entry in body.time_entries]
    projects = [project.model_dump() for project in body.projects]
    return TimeTableView(time_entries, projects, tz=tz).render_time_table()


async def _run_logged(request: Request, body: TimeTableRequest, endpoint: str, render):
    """
    Build the time table, render it, and record the request.

    Timestamp errors become 422 VALIDATION_ERROR responses; anything else
    unexpected becomes a 500.
    """
    start_time = time.time()

    request_log = RequestLog(
        endpoint=endpoint,
        method="POST",
        client_ip=get_client_ip(request),
        display_timezone=body.timezone,
        entries_received=len(body.time_entries),
    )

    try:
        tz = resolve_request_timezone(body.timezone)
        week = build_week(body, tz)
        response = await render(week)

        request_log.status_code = 200
        request_log.days_generated = len(week.days)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        return response

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
            for detail in e.detail.get("details", []):
                request_log.details.append(("validation_error", detail))
        else:
            request_log.error_message = str(e.detail)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        raise

    except (ValueError, TypeError) as e:
        # Unparseable timestamps
        request_log.status_code = 422
        request_log.error_code = ErrorCodes.VALIDATION_ERROR
        request_log.error_message = str(e)
        request_log.details.append(("validation_error", str(e)))
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=error_detail(
                "Time entry timestamps could not be parsed",
                ErrorCodes.VALIDATION_ERROR,
                [str(e)],
            ),
        )

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail("Internal server error", ErrorCodes.INTERNAL_ERROR),
        )

    finally:
        # Always log the request
        try:
            log_request(request_log)
        except Exception:
            # Don't fail the request if logging fails
            pass


@router.post("/timetable", response_model=TimeTableWeekResponse)
async def create_timetable_endpoint(
    request: Request,
    body: TimeTableRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Group time entries by day and resolve project colors.

    Returns the time table as JSON.
    """

    async def render(week: TimeTableWeek):
        return TimeTableWeekResponse.model_validate(week.to_dict())

    return await _run_logged(request, body, "/v1/timetable", render)


@router.post("/timetable/export")
async def export_timetable_endpoint(
    request: Request,
    body: TimeTableRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Group time entries by day and return the time table as an Excel workbook.
    """

    async def render(week: TimeTableWeek):
        # Workbook generation is sync, keep it off the event loop
        excel_bytes = await asyncio.to_thread(timetable_excel_to_bytes, week)
        first_date = week.days[0].date if week.days else "empty"
        return Response(
            content=excel_bytes,
            media_type=XLSX_MEDIA_TYPE,
            headers={
                "Content-Disposition": f'attachment; filename="timetable_{first_date}.xlsx"'
            },
        )

    return await _run_logged(request, body, "/v1/timetable/export", render)
