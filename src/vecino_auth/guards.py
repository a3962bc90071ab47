"""Request gates for authentication and role-based authorization.

Two composable steps, independent of any web framework:

- ``authenticate`` turns an ``Authorization`` header into verified
  session claims.
- ``authorize`` checks the claims' role against the roles a route
  permits. It must run after ``authenticate``; when no claims are
  available it denies access.
"""

import logging
from collections.abc import Collection

from vecino_auth.exceptions import ForbiddenError, MissingTokenError
from vecino_auth.schemas import SessionClaims
from vecino_auth.services.jwt_service import JWTService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from a ``Bearer <token>`` header value.

    Raises
    ------
    MissingTokenError
        If the header is absent, uses another scheme, or has no token
    """
    if not authorization:
        raise MissingTokenError

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        msg = "Authorization header must use the Bearer scheme"
        raise MissingTokenError(msg)

    token = token.strip()
    if not token:
        msg = "Bearer token is empty"
        raise MissingTokenError(msg)

    return token


def authenticate(authorization: str | None, jwt_service: JWTService) -> SessionClaims:
    """Verify the bearer token of a request and return its claims.

    Raises
    ------
    MissingTokenError
        If no bearer token was supplied
    InvalidTokenError
        If the token signature or payload is invalid
    ExpiredTokenError
        If the token has expired
    """
    token = extract_bearer_token(authorization)
    return jwt_service.verify_token(token)


def authorize(
    claims: SessionClaims | None,
    allowed_roles: Collection[str],
) -> SessionClaims:
    """Allow the request only if the authenticated role is permitted.

    Raises
    ------
    ForbiddenError
        If authentication never ran or the role is not in ``allowed_roles``
    """
    if claims is None:
        logger.warning("Role check reached without an authenticated identity")
        raise ForbiddenError

    permitted = {getattr(role, "value", role) for role in allowed_roles}
    if not claims.has_role(*permitted):
        logger.info(
            "Role %r denied for user %s (allowed: %s)",
            claims.role,
            claims.user_id,
            ", ".join(sorted(permitted)),
        )
        raise ForbiddenError

    return claims
