from enum import Enum


class UserRole(str, Enum):
    """Account roles: residents, service providers, and administrators."""

    USER = "user"
    PROVIDER = "provider"
    ADMIN = "admin"

    @classmethod
    def self_assignable(cls) -> frozenset["UserRole"]:
        """Roles a person may pick for themselves when registering."""
        return frozenset({cls.USER, cls.PROVIDER})
