"""User domain: accounts, roles, residency."""

from vecino.domain.user.aggregates import User
from vecino.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from vecino.domain.user.repositories import UserRepository
from vecino.domain.user.validation import validate_login, validate_registration
from vecino.domain.user.value_objects import (
    DEFAULT_NEIGHBORHOOD,
    Email,
    Neighborhood,
    UserRole,
    normalize_email,
)

__all__ = [
    "DEFAULT_NEIGHBORHOOD",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "Neighborhood",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "normalize_email",
    "validate_login",
    "validate_registration",
]
