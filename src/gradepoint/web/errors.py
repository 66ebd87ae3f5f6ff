"""Global exception handlers for the Web API.

Every failure is rendered as a JSON object with a "message" field:
- HTTPException -> its status code and detail
- RequestValidationError -> 400 with the offending fields
- RecordStoreError / GradeValidationError -> 400
- anything else -> 500 with a generic message, details only in the log
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gradepoint.core.calculator import GradeValidationError
from gradepoint.db.record_store import RecordStoreError

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.info("request_invalid", path=request.url.path, message=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )

    @app.exception_handler(RecordStoreError)
    async def store_error_handler(request: Request, exc: RecordStoreError):
        logger.info("store_rejected", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc)},
        )

    @app.exception_handler(GradeValidationError)
    async def grade_error_handler(request: Request, exc: GradeValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )


def format_validation_errors(errors: list[dict]) -> str:
    """Build a readable message from pydantic error entries.

    Example: 'Validation error: creditHours: Input should be greater than
    or equal to 0.5'
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")]
        msg = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "Validation error: " + "; ".join(parts)
