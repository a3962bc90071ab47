from vecino.domain.user.value_objects.email import Email, normalize_email
from vecino.domain.user.value_objects.neighborhood import (
    DEFAULT_NEIGHBORHOOD,
    Neighborhood,
)
from vecino.domain.user.value_objects.user_role import UserRole

__all__ = [
    "DEFAULT_NEIGHBORHOOD",
    "Email",
    "Neighborhood",
    "UserRole",
    "normalize_email",
]
