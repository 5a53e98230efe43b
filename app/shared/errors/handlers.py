"""
Centralized error handlers for FastAPI.

Maps users domain errors to HTTP responses by their error kind.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.users.errors import ErrorKind, UserDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: HTTP_400,
    ErrorKind.NOT_FOUND: HTTP_404,
    ErrorKind.CONFLICT: HTTP_409,
    ErrorKind.INTERNAL: HTTP_500,
}


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation_error(exc: RequestValidationError) -> str | None:
    """Summarize the first offending field, e.g. ``path.user_id: ...``."""
    errors = exc.errors()
    if not errors:
        return None
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Translate a domain error kind to its HTTP status."""
        status_code = HTTP_STATUS_BY_KIND[exc.kind]
        if status_code >= HTTP_500:
            logger.error("Request failed: %s", exc.message)
        else:
            logger.warning("Request rejected (%d): %s", status_code, exc.message)
        return _error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Unparsable bodies, ids or field types are bad requests."""
        detail = _describe_validation_error(exc)
        logger.warning("Invalid request: %s", detail)
        return _error_response(HTTP_400, "invalid request", detail)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "internal server error")
