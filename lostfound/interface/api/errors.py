"""Exception handlers mapping errors to the response envelope.

Services raise domain errors; this module is the one place that turns
them into HTTP status codes.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lostfound.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from lostfound.interface.error import AuthenticationError, ForbiddenError


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a failed envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


_LOCATIONS = ("body", "query", "path", "header", "cookie")


def _field_names(exc: RequestValidationError) -> list[str]:
    """Names of the offending fields, without the body/query prefix."""
    names = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in _LOCATIONS]
        names.append(".".join(loc) or "body")
    return list(dict.fromkeys(names))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.public_message)


async def not_authorized_handler(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, exc.public_message)


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn(
        "Unmapped domain error", error_type=type(exc).__name__, error=str(exc)
    )
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def forbidden_error_handler(
    request: Request, exc: ForbiddenError
) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed request bodies and parameters with 400."""
    fields = _field_names(exc)
    logfire.warn(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        fields=fields,
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST, f"Invalid request: {', '.join(fields)}"
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = (
        str(exc.detail)
        if exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR
        else "Internal server error"
    )
    return error_response(exc.status_code, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic message."""
    logfire.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Starlette picks the handler of the closest class in the MRO, so the
    specific domain errors win over DomainError.
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(NotAuthorizedError, not_authorized_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(ForbiddenError, forbidden_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
