"""Vecino Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the marketplace domain. It handles:
- Password hashing (bcrypt)
- JWT session token creation and verification
- Request gates (bearer authentication, role authorization)

Architecture:
    vecino_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── guards.py           # Authentication / authorization gates
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from vecino_auth import JWTService, PasswordHashingService, authenticate
"""

from vecino_auth.exceptions import (
    AuthError,
    ExpiredTokenError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenError,
    WeakPasswordError,
)
from vecino_auth.guards import authenticate, authorize, extract_bearer_token
from vecino_auth.schemas import SessionClaims
from vecino_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Gates
    "authenticate",
    "authorize",
    "extract_bearer_token",
    # Schemas
    "SessionClaims",
    # Exceptions
    "AuthError",
    "TokenError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "ForbiddenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
