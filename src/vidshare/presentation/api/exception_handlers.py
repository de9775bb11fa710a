"""Centralized exception handlers for the FastAPI application.

Domain exceptions and gate rejections are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE",
        "errors": [{"field": "...", "message": "..."}]   # validation only
    }

The token endpoint uses the OAuth2 error format instead:
    {"error": "invalid_grant", "error_description": "..."}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from vidshare.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceUnavailableError,
)
from vidshare.presentation.api.gates.pipeline import (
    TEXT_MEDIA_TYPE,
    GateRejectedError,
)
from vidshare_auth import OAuthError, WeakPasswordError

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.REGISTRATION_DISABLED: status.HTTP_400_BAD_REQUEST,
    # 401 / 403
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ADMIN_REQUIRED: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VIDEO_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    # 503 Service Unavailable
    ErrorCode.PERSISTENCE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, PersistenceUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    errors: list[dict[str, str]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict = {"detail": message, "code": code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(GateRejectedError)
    async def gate_rejection_handler(
        request: Request,
        exc: GateRejectedError,
    ) -> Response:
        """Render the rejection produced by a request gate."""
        rejection = exc.rejection
        logger.info(
            "Request rejected on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            rejection.detail,
            rejection.code.value,
        )

        if rejection.media_type == TEXT_MEDIA_TYPE:
            return PlainTextResponse(
                rejection.detail,
                status_code=rejection.status_code,
                headers=rejection.headers,
            )

        return _create_error_response(
            status_code=rejection.status_code,
            message=rejection.detail,
            code=rejection.code.value,
            errors=rejection.errors,
            headers=rejection.headers,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(OAuthError)
    async def oauth_exception_handler(
        request: Request,
        exc: OAuthError,
    ) -> JSONResponse:
        """Render token endpoint failures in the OAuth2 error format."""
        logger.info(
            "OAuth error on %s %s: %s (%s)",
            request.method,
            request.url.path,
            exc.error,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.error, "error_description": exc.message},
        )

    @app.exception_handler(WeakPasswordError)
    async def weak_password_handler(
        request: Request,
        exc: WeakPasswordError,
    ) -> JSONResponse:
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=exc.message,
            code=ErrorCode.VALIDATION_ERROR.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for exceptions not handled above.

        The full traceback is logged; the client only sees a generic message.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An unexpected error occurred. Please try again later.",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
