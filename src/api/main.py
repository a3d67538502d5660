"""FastAPI application entry point."""

import warnings
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import health_router, timetable_router
from core.config import API_DEBUG, API_VERSION, DB_PATH


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warn at startup when request logs have nowhere to go."""
    if not DB_PATH.exists():
        warnings.warn(
            f"Request log database not found at {DB_PATH}; run scripts/init_db.py"
        )
    yield


def create_app() -> FastAPI:
    """Build the time table API with its routers and error handlers."""
    application = FastAPI(
        title="Time Table API",
        description="Groups time entries by day and resolves project display colors",
        version=API_VERSION,
        debug=API_DEBUG,
        lifespan=lifespan,
    )

    if API_DEBUG:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report malformed bodies in the standard error format."""
        details = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse(
                error="Invalid request body",
                code=ErrorCodes.INVALID_REQUEST,
                details=details,
            ).model_dump(),
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with standard error format."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Internal server error",
                code=ErrorCodes.INTERNAL_ERROR,
            ).model_dump(),
        )

    application.include_router(health_router)
    application.include_router(timetable_router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, reload=API_DEBUG)
