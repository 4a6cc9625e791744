"""Exception handlers producing the JSON error envelope."""

from typing import Any

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitness_server.core.exceptions import AppException

logger = structlog.get_logger()


def error_response(
    request: Request, status_code: int, error: str, message: Any, **extra: Any
) -> JSONResponse:
    """Envelope shared by every error: ``{error, message, path, ...}``."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, **extra, "path": str(request.url)},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Raised by services; status and message come from the exception."""
    return error_response(request, exc.status_code, exc.__class__.__name__, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, "HTTPException", exc.detail)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Missing or malformed request fields.

    These are client errors and answer 400 rather than FastAPI's default 422.
    """
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "ValidationError",
        "Missing or invalid required fields",
        details=jsonable_encoder(exc.errors()),
    )


async def store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Driver errors are logged in full and reported to callers generically."""
    logger.error(
        "store_error",
        method=request.method,
        path=request.url.path,
        error_type=exc.__class__.__name__,
        error=str(exc),
    )
    return error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "StoreError", "Internal Server Error"
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", method=request.method, path=request.url.path)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred",
    )
