"""
Global Exception Handlers for Multilingua

Every error leaves the API in one envelope:

{
    "error": {
        "status_code": 404,
        "message": "Subject with id '9999' not found",
        "type": "Not Found",
        "error_code": "RESOURCE_SUBJECT_NOT_FOUND",
        "details": {"resource_type": "Subject", "resource_id": 9999},
        "path": "/api/articles"
    }
}

Catalog errors carry their own status and code; framework errors are mapped
through ``STATUS_TABLE``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from multilingua.exceptions import ErrorCode, MultilinguaError

logger = logging.getLogger(__name__)

# status -> (reason shown as "type", fallback error code)
STATUS_TABLE: dict[int, tuple[str, ErrorCode]] = {
    status.HTTP_400_BAD_REQUEST: ("Bad Request", ErrorCode.VALIDATION_FAILED),
    status.HTTP_404_NOT_FOUND: ("Not Found", ErrorCode.RESOURCE_NOT_FOUND),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method Not Allowed", ErrorCode.UNKNOWN_ERROR),
    status.HTTP_409_CONFLICT: ("Conflict", ErrorCode.DUPLICATE_RESOURCE),
    422: ("Validation Error", ErrorCode.VALIDATION_FAILED),
    status.HTTP_500_INTERNAL_SERVER_ERROR: ("Internal Server Error", ErrorCode.INTERNAL_ERROR),
}


def get_error_type(status_code: int) -> str:
    return STATUS_TABLE.get(status_code, ("Error", ErrorCode.UNKNOWN_ERROR))[0]


def get_http_error_code(status_code: int) -> str:
    return STATUS_TABLE.get(status_code, ("Error", ErrorCode.UNKNOWN_ERROR))[1].value


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Build the error envelope; empty optional parts are left out."""
    body: dict[str, Any] = {
        "status_code": status_code,
        "message": message,
        "type": get_error_type(status_code),
    }
    if error_code:
        body["error_code"] = error_code.value if isinstance(error_code, ErrorCode) else error_code
    if details:
        body["details"] = details
    if path:
        body["path"] = path
    return JSONResponse(status_code=status_code, content={"error": body})


def _respond(request: Request, status_code: int, message: str, error_code, details=None) -> JSONResponse:
    return create_error_response(status_code, message, error_code, details, path=request.url.path)


async def catalog_exception_handler(request: Request, exc: MultilinguaError) -> JSONResponse:
    logger.warning(
        "%s on %s: %s",
        type(exc).__name__,
        request.url.path,
        exc.message,
        extra={"status_code": exc.status_code, "error_code": exc.error_code.value, "path": request.url.path},
    )
    return _respond(request, exc.status_code, exc.message, exc.error_code, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.info("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
    return _respond(request, exc.status_code, str(exc.detail), get_http_error_code(exc.status_code))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request-schema failures (422), with one entry per offending field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Rejected request body on %s: %d error(s)", request.url.path, len(errors))
    return _respond(
        request,
        422,
        "Validation error",
        ErrorCode.VALIDATION_FAILED,
        {"validation_errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    # internals stay in the log
    return _respond(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        ErrorCode.INTERNAL_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MultilinguaError, catalog_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    logger.debug("Exception handlers registered")
