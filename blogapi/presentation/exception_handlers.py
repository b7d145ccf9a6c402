"""Exception handlers for converting exceptions to HTTP responses.

Every failure leaves the API in the same envelope:

    {"success": false, "error": <category>, "message": <detail>, "error_code": <code>}

ApplicationError and DomainException subclasses carry their own error_code,
and the HTTP status comes from ERROR_CODE_TO_HTTP_STATUS. To add a new
exception, create the class and add its error_code to the mapping; no new
handler is needed.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError, PyMongoError

from blogapi.application.exceptions import (
    ApplicationError,
    BlogAlreadyExistsError,
    UserAlreadyExistsError,
)
from blogapi.domain.exceptions import DomainException
from blogapi.presentation.error_codes import (
    get_error_category,
    get_http_status_for_error_code,
)

logger = logging.getLogger(__name__)

# Leading loc segment FastAPI adds to say where a value came from
_REQUEST_PARTS = {"body", "query", "path", "header", "cookie"}


def error_response(
    http_status: int, message: str, error_code: str, **extra: Any
) -> JSONResponse:
    """Build the standard error envelope."""
    return JSONResponse(
        status_code=http_status,
        content={
            "success": False,
            "error": get_error_category(http_status),
            "message": message,
            "error_code": error_code,
            **extra,
        },
    )


def error_path(loc: tuple[int | str, ...]) -> str:
    """
    Render a pydantic error location as a client-facing path.

    The request part prefix is dropped and the remaining segments are
    reversed, so ("body", "name", "first") becomes "first.name".
    """
    segments = list(loc)
    if len(segments) > 1 and segments[0] in _REQUEST_PARTS:
        segments = segments[1:]
    return ".".join(str(segment) for segment in reversed(segments))


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    Conflicts on user fields also report which field collided.
    """
    http_status = get_http_status_for_error_code(exc.error_code)

    extra: dict[str, Any] = {}
    if isinstance(exc, UserAlreadyExistsError):
        extra["field"] = exc.field

    return error_response(http_status, exc.message, exc.error_code, **extra)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle ALL domain layer exceptions."""
    http_status = get_http_status_for_error_code(exc.error_code)
    return error_response(http_status, exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Only the first error is reported, always as 400 Bad Request. The same
    malformed input therefore always produces the same response.
    """
    first_error = exc.errors()[0]

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        first_error["msg"],
        "VALIDATION_ERROR",
        path=error_path(tuple(first_error["loc"])),
    )


async def duplicate_key_error_handler(
    request: Request, exc: DuplicateKeyError
) -> JSONResponse:
    """
    Handle unique index violations.

    These only happen when two requests race past the service-level
    uniqueness check, so they are reported like the check itself would.
    """
    key_value = (exc.details or {}).get("keyValue") or {}
    field = next(iter(key_value), None)
    logger.warning(f"Duplicate key on {field}: {exc}")

    if field in UserAlreadyExistsError.MESSAGES:
        return await application_error_handler(request, UserAlreadyExistsError(field))
    if field == "title":
        return await application_error_handler(request, BlogAlreadyExistsError())

    return error_response(status.HTTP_409_CONFLICT, "Resource already exists", "DUPLICATE_KEY")


async def database_error_handler(
    request: Request, exc: PyMongoError
) -> JSONResponse:
    """Handle database errors, passing the driver's message through."""
    logger.error(f"Database error: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), "DATABASE_ERROR"
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all other unhandled exceptions.

    This is the catch-all handler for any unexpected errors.
    """
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), "INTERNAL_SERVER_ERROR"
    )
