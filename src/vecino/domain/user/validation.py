"""Registration and login input checks.

Validators never touch persistence; they only inspect the raw values a
client sent and collect every problem in a ValidationResult.
"""

from typing import Any, Optional

from vecino.domain.shared.validation import ValidationResult, clean_text
from vecino.domain.user.value_objects import Neighborhood, UserRole
from vecino.domain.user.value_objects.email import EMAIL_PATTERN, normalize_email
from vecino_auth.services.password_service import PasswordHashingService

REGISTRATION_REQUIRED_MESSAGE = "Name, email and password are required"
LOGIN_REQUIRED_MESSAGE = "Email and password are required"

MAX_NAME_LENGTH = 100


def validate_registration(  # NOQA: PLR0913
    name: Any,
    email: Any,
    password: Any,
    neighborhood: Optional[Any] = None,
    role: Optional[Any] = None,
) -> ValidationResult:
    result = ValidationResult()

    clean_name = clean_text(name)
    clean_email = clean_text(email)
    if clean_name is None:
        result.add("name", "Name is required")
    elif len(clean_name) > MAX_NAME_LENGTH:
        result.add("name", f"Name must be at most {MAX_NAME_LENGTH} characters")

    if clean_email is None:
        result.add("email", "Email is required")
    elif not EMAIL_PATTERN.match(normalize_email(clean_email)):
        result.add("email", "Invalid email format")

    if not isinstance(password, str) or not password:
        result.add("password", "Password is required")
    elif len(password) < PasswordHashingService.MIN_LENGTH:
        result.add(
            "password",
            f"Password must be at least {PasswordHashingService.MIN_LENGTH} characters",
        )
    elif len(password.encode("utf-8")) > PasswordHashingService.MAX_BYTES:
        result.add(
            "password",
            f"Password cannot exceed {PasswordHashingService.MAX_BYTES} bytes",
        )

    if neighborhood is not None and neighborhood not in Neighborhood.values():
        result.add(
            "neighborhood",
            "Neighborhood must be one of: " + ", ".join(Neighborhood.values()),
        )

    if role is not None and role not in {r.value for r in UserRole.self_assignable()}:
        result.add("role", "Role must be 'user' or 'provider'")

    return result


def validate_login(email: Any, password: Any) -> ValidationResult:
    result = ValidationResult()
    if clean_text(email) is None:
        result.add("email", "Email is required")
    if not isinstance(password, str) or not password:
        result.add("password", "Password is required")
    return result


def missing_required(result: ValidationResult, *fields: str) -> bool:
    """True when any of ``fields`` failed because it was absent."""
    return any(
        error.field in fields and error.message.endswith("is required")
        for error in result.errors
    )
