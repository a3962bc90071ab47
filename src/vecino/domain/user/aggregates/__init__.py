from vecino.domain.user.aggregates.user import (
    DEFAULT_ADDRESS,
    DEFAULT_PHONE,
    DEFAULT_UNIT_NUMBER,
    User,
)

__all__ = ["DEFAULT_ADDRESS", "DEFAULT_PHONE", "DEFAULT_UNIT_NUMBER", "User"]
