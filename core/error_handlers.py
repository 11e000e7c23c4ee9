"""Error handlers for the FastAPI application.

Every failure leaves the API in the same envelope:
`{"error": {"message": ..., "status_code": ..., "details": ...}}`.
"""

from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def _where(request: Request) -> str:
    return f"{request.method} {request.url.path}"


def create_error_response(
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the standard JSON error envelope.

    `details` is left out of the body when empty.
    """
    error_body = {"message": message, "status_code": status_code}
    if details:
        error_body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error_body})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application exceptions raised by routers and services.

    Client errors are logged as warnings, server-side failures
    (database, AI coach, missing configuration) as errors.
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("%s -> %s %s %s", _where(request), exc.status_code, exc.message, exc.details or "")
    return create_error_response(exc.message, exc.status_code, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten request validation errors into field/message pairs."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Invalid request on %s: %s", _where(request), errors)
    return create_error_response(
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"validation_errors": errors},
    )


async def integrity_exception_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Report constraint violations (e.g. a username taken concurrently) as conflicts."""
    logger.warning("Constraint violation on %s: %s", _where(request), exc.orig)
    return create_error_response(
        "Request conflicts with existing data",
        status.HTTP_400_BAD_REQUEST,
        {"type": "integrity_error"},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy errors without exposing internals to clients."""
    logger.error("Database error on %s: %s", _where(request), exc, exc_info=True)
    return create_error_response(
        "A database error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "database_error"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s: %s", _where(request), exc, exc_info=True)
    return create_error_response(
        "An internal server error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "internal_error"},
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
