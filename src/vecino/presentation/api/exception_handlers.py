"""Centralized exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses with one
consistent error format.

Error Response Format:
    {
        "success": false,
        "error": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Every token failure (missing, malformed, badly signed, expired) gets the
same 401 body; only the server log tells them apart.

Usage:
    from vecino.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from vecino.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ServiceUnavailableError,
    ValidationError,
)
from vecino_auth import (
    AuthError,
    ExpiredTokenError,
    ForbiddenError,
    InvalidCredentialsError,
    MissingTokenError,
    TokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Invalid or missing authentication token"

# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 401 / 403
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROVIDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    # 503 Service Unavailable - database unreachable
    ErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

STATUS_TO_ERROR_CODE: dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.ENTITY_NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    status.HTTP_503_SERVICE_UNAVAILABLE: ErrorCode.SERVICE_UNAVAILABLE,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ServiceUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    details: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {"success": False, "error": message, "code": code}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _log_token_failure(request: Request, exc: TokenError) -> None:
    if isinstance(exc, MissingTokenError):
        kind = "missing token"
    elif isinstance(exc, ExpiredTokenError):
        kind = "expired token"
    else:
        kind = "invalid token"
    logger.warning(
        "Authentication failed on %s %s: %s (%s)",
        request.method,
        request.url.path,
        kind,
        exc.message,
    )


def setup_exception_handlers(app: FastAPI) -> None:  # NOQA: C901
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

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

        details = exc.details if isinstance(exc, ValidationError) else None
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            details=details,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle authentication and authorization failures."""
        if isinstance(exc, TokenError):
            _log_token_failure(request, exc)
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=UNAUTHORIZED_MESSAGE,
                code=ErrorCode.UNAUTHORIZED.value,
                headers={"WWW-Authenticate": "Bearer"},
            )

        if isinstance(exc, ForbiddenError):
            logger.warning(
                "Forbidden on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
            )
            return _create_error_response(
                status_code=status.HTTP_403_FORBIDDEN,
                message=exc.message,
                code=ErrorCode.FORBIDDEN.value,
            )

        if isinstance(exc, InvalidCredentialsError):
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=exc.message,
                code=ErrorCode.INVALID_CREDENTIALS.value,
            )

        if isinstance(exc, WeakPasswordError):
            return _create_error_response(
                status_code=status.HTTP_400_BAD_REQUEST,
                message=exc.message,
                code=ErrorCode.WEAK_PASSWORD.value,
            )

        logger.warning(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=exc.message,
            code=ErrorCode.UNAUTHORIZED.value,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Render request parsing errors as 400 in the common envelope."""
        fields = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())[1:]),
                "message": error.get("msg", "Invalid value"),
            }
            for error in exc.errors()
        ]
        logger.info(
            "Invalid request on %s %s: %s",
            request.method,
            request.url.path,
            fields,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid request body",
            code=ErrorCode.VALIDATION_ERROR.value,
            details={"fields": fields},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        _request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Wrap HTTPException details in the common envelope."""
        code = STATUS_TO_ERROR_CODE.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            code=code.value,
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        The stack trace stays in the server log; the client only sees a
        generic message.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
