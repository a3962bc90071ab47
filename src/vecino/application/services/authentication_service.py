"""Authentication service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from vecino.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRole,
    validate_login,
    validate_registration,
)
from vecino.domain.user.validation import (
    LOGIN_REQUIRED_MESSAGE,
    REGISTRATION_REQUIRED_MESSAGE,
    missing_required,
)
from vecino_auth import InvalidCredentialsError, JWTService, PasswordHashingService

if TYPE_CHECKING:
    from vecino.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates vecino_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password
    - Profile lookup for an authenticated session

    bcrypt is CPU bound, so hashing and verification run in a worker
    thread and never block the event loop.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def issue_token(self, user: User) -> str:
        return self._jwt_service.create_token(
            user_id=user.id,
            role=user.role,
            extra_claims=user.token_claims(),
        )

    async def register(  # NOQA: PLR0913
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        phone: Optional[str] = None,
        neighborhood: Optional[str] = None,
        address: Optional[str] = None,
        unit_number: Optional[str] = None,
        role: Optional[str] = None,
    ) -> tuple[User, str]:
        result = validate_registration(name, email, password, neighborhood, role)
        if missing_required(result, "name", "email", "password"):
            result.raise_if_invalid(REGISTRATION_REQUIRED_MESSAGE)
        result.raise_if_invalid()

        normalized = Email(email)
        existing_user = await self._user_repo.find_by_email(normalized)
        if existing_user is not None:
            raise EmailAlreadyExistsError(normalized.value)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = User.create(
            name=name,
            email=normalized,
            password_hash=password_hash,
            phone=phone,
            role=UserRole(role) if role else UserRole.USER,
            neighborhood=neighborhood,
            address=address,
            unit_number=unit_number,
            is_verified=True,
        )
        user = await self._user_repo.create(user)

        logger.info("User registered: %s (role: %s)", user.email, user.role.value)
        return user, self.issue_token(user)

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> tuple[User, str]:
        validate_login(email, password).raise_if_invalid(LOGIN_REQUIRED_MESSAGE)

        try:
            normalized = Email(email)
        except InvalidEmailError:
            logger.info("Login rejected: malformed email")
            raise InvalidCredentialsError from None

        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            logger.info("Login failed: unknown email %s", normalized.value)
            raise InvalidCredentialsError

        is_valid = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not is_valid:
            logger.info("Login failed: wrong password for %s", normalized.value)
            raise InvalidCredentialsError

        logger.info("User logged in: %s", user.email)
        return user, self.issue_token(user)

    async def get_profile(self, user_id: str) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
