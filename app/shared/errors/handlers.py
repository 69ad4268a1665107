"""
Centralized error handlers for FastAPI.

Maps accounts domain errors to HTTP responses:

    ValidationError / malformed request -> 400
    AuthenticationError                 -> 401
    NotFoundError                       -> 404
    PersistenceError, AuthProviderError -> 500

No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse shape ``{"error", "detail"?}``.
Every error is logged here, at the boundary where it is caught.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.accounts.errors import (
    AccountsDomainError,
    AuthenticationError,
    AuthProviderError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500

INTERNAL_ERROR = "Internal Server Error"


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _describe_request_errors(exc: RequestValidationError) -> str:
    """Summarize pydantic errors as 'field: message' pairs."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location or 'body'}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle invalid input detected by the service or entities."""
        logger.warning(
            "Validation failed on %s %s: field=%s",
            request.method,
            request.url.path,
            exc.field,
        )
        return _error_response(HTTP_400, exc.message, exc.field)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed JSON or wrongly typed fields."""
        detail = _describe_request_errors(exc)
        logger.warning(
            "Malformed request on %s %s: %s", request.method, request.url.path, detail
        )
        return _error_response(HTTP_400, "Invalid request body", detail)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        """Handle missing, invalid, or expired auth tokens."""
        logger.warning("Unauthenticated request to %s: %s", request.url.path, exc.reason)
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(
        _request: Request, exc: NotFoundError
    ) -> JSONResponse:
        """Handle absent profile, wallet, or watchlist."""
        logger.info("%s not found for user=%s", exc.resource, exc.user_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(AuthProviderError)
    async def handle_auth_provider(
        request: Request, exc: AuthProviderError
    ) -> JSONResponse:
        """Handle token verification infrastructure failures."""
        logger.error("Auth provider failure on %s: %s", request.url.path, exc.reason)
        return _error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(PersistenceError)
    async def handle_persistence(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        """Handle document store failures. Never retried."""
        logger.error(
            "Persistence failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(AccountsDomainError)
    async def handle_accounts_domain(
        _request: Request, exc: AccountsDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled accounts domain errors."""
        logger.error("Unhandled accounts domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR)
