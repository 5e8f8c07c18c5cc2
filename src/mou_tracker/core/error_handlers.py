"""
Global Error Handlers

Maps every exception that escapes a route onto the response envelope
{"success": false, "error": <message>, "code": <error code>}.

Layers, most specific first:
- ServiceError: domain taxonomy (400/401/403/404/409/500)
- RequestValidationError: body/path/query validation (400)
- HTTPException: framework-raised errors (405, 429, ...)
- IntegrityError: unique constraint races the pre-checks missed (409)
- SQLAlchemyError: store failures (500)
- Exception: catch-all, never leaks internal details (500)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mou_tracker.core.errors import ServiceError

logger = logging.getLogger(__name__)


def error_body(message: str, code: str, **extra) -> dict:
    """Build the failure envelope."""
    return {"success": False, "error": message, "code": code, **extra}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(
                f"Service error on {request.url.path}: {exc.message}",
                extra={"error_code": exc.error_code, "path": request.url.path},
            )
        else:
            logger.info(
                f"Request rejected on {request.url.path}: {exc.error_code}",
                extra={"error_code": exc.error_code, "path": request.url.path},
            )
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message, exc.error_code),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                "Invalid request data",
                "VALIDATION_ERROR",
                details=[
                    {
                        "field": ".".join(str(loc) for loc in e["loc"] if loc != "body"),
                        "message": e["msg"],
                    }
                    for e in exc.errors()
                ],
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict):
            message = exc.detail.get("message", "Request failed")
            code = exc.detail.get("error", "HTTP_ERROR")
        else:
            message = str(exc.detail)
            code = "HTTP_ERROR"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message, code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=error_body("A record with the same unique value already exists.", "CONFLICT"),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("The data store is unavailable.", "DEPENDENCY_FAILURE"),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                "An unexpected error occurred. Please try again later.",
                "INTERNAL_ERROR",
            ),
        )
