"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from vecino.domain.user.aggregates.user import User
from vecino.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already holds the email.
        """

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
