"""Error Handlers — map exceptions to the Users API error envelope and log them once.

Invariants:
    - UsersApiError → its own http_status (404 not found, 503 store unavailable) and to_response()
    - RequestValidationError → 400 VALIDATION_ERROR with one detail per bad field
    - Any other Exception → 500 INTERNAL_ERROR; the message never reaches the client
    - Client errors (4xx) log at WARNING; server errors log at the level of their severity
    - Every log line carries method, path, error_code and http_status;
      domain errors add the user_id and operation from their ErrorContext

Design Decisions:
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import ErrorCategory, ErrorSeverity, UsersApiError

logger = logging.getLogger(__name__)

_SEVERITY_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UsersApiError, users_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def log_level_for(exc: UsersApiError) -> int:
    if exc.http_status < 500:
        return logging.WARNING
    return _SEVERITY_LEVELS.get(exc.severity, logging.ERROR)


def _request_extra(request: Request, code: str, http_status: int) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "error_code": code,
        "http_status": http_status,
    }


async def users_api_error_handler(request: Request, exc: UsersApiError) -> JSONResponse:
    extra = _request_extra(request, exc.code, exc.http_status)
    extra["user_id"] = exc.context.user_id
    extra["operation"] = exc.context.operation
    logger.log(log_level_for(exc), f"{type(exc).__name__}: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request: {', '.join(d['field'] for d in details)}",
        extra=_request_extra(request, "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__}",
        exc_info=exc,
        extra=_request_extra(
            request, "INTERNAL_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR,
        ),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )
