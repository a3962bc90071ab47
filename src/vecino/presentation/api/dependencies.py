"""FastAPI dependency injection for the Vecino API.

Provides dependencies for:
- Settings and the data store held on ``app.state``
- Authentication (session claims from the bearer JWT)
- Role-based authorization
- Service instances
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vecino.application.services import (
    AuthenticationService,
    BookingService,
    ProviderService,
)
from vecino.domain.user import UserRole
from vecino.infrastructure.persistence.store import DataStore
from vecino_auth import (
    JWTService,
    PasswordHashingService,
    SessionClaims,
    authenticate,
    authorize,
)
from vecino_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens (documents the header in OpenAPI)
security = HTTPBearer(auto_error=False)


def get_api_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_data_store(request: Request) -> DataStore:
    """The store built at startup.

    Raises
    ------
    RuntimeError
        If the application lifespan has not run
    """
    store = getattr(request.app.state, "data_store", None)
    if store is None:
        msg = "Data store not initialized; was the application lifespan started?"
        raise RuntimeError(msg)
    return store


SettingsDep = Annotated[Settings, Depends(get_api_settings)]
DataStoreDep = Annotated[DataStore, Depends(get_data_store)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret.get_secret_value(),
        token_expire_days=settings.jwt_expire_days,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_authentication_service(
    store: DataStoreDep,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=store.users,
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_provider_service(store: DataStoreDep) -> ProviderService:
    return ProviderService(store.providers)


def get_booking_service(store: DataStoreDep) -> BookingService:
    return BookingService(store.bookings, store.providers)


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
ProviderServiceDep = Annotated[ProviderService, Depends(get_provider_service)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]


# -----------------------------------------------------------------------------
# Session claims (JWT Authentication)
# -----------------------------------------------------------------------------


async def authenticate_request(
    request: Request,
    jwt_service: JWTServiceDep,
    _credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> SessionClaims:
    """
    FastAPI dependency verifying the bearer token of a request.

    The claims are attached to ``request.state.claims`` for later gates
    and returned to the endpoint. No database access happens here.

    Raises
    ------
    MissingTokenError, InvalidTokenError, ExpiredTokenError
        Rendered as a uniform 401 by the exception handlers
    """
    claims = authenticate(request.headers.get("Authorization"), jwt_service)
    request.state.claims = claims
    logger.debug("Authenticated user %s (role %s)", claims.user_id, claims.role)
    return claims


# Type alias for injected session claims
CurrentClaims = Annotated[SessionClaims, Depends(authenticate_request)]


class RequireRole:
    """Role gate for a route.

    Reads the claims stored by ``authenticate_request``; list that
    dependency first. Without claims the gate denies with 403.

    Examples
    --------
    >>> @router.post(
    ...     "",
    ...     dependencies=[
    ...         Depends(authenticate_request),
    ...         Depends(RequireRole(UserRole.PROVIDER, UserRole.ADMIN)),
    ...     ],
    ... )
    """

    def __init__(self, *roles: UserRole):
        self.roles = roles

    def __call__(self, request: Request) -> SessionClaims:
        return authorize(getattr(request.state, "claims", None), self.roles)
