"""Repositories that degrade to mock data when the database is down.

Each wrapper receives the primary repository, or None when the database
was unreachable at startup. With a primary every call is delegated.
Without one, reads answer from the fixed demo dataset and never raise,
while writes raise ServiceUnavailableError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union

from vecino.domain.marketplace import (
    Booking,
    BookingRepository,
    Provider,
    ProviderRepository,
)
from vecino.domain.shared.exceptions import ServiceUnavailableError
from vecino.domain.user import Email, User, UserRepository, normalize_email
from vecino_demo import data as demo_data

logger = logging.getLogger(__name__)


def _unavailable(operation: str) -> ServiceUnavailableError:
    logger.warning("Rejected %s: database not available", operation)
    return ServiceUnavailableError()


class FallbackUserRepository(UserRepository):
    def __init__(self, primary: Optional[UserRepository]):
        self._primary = primary

    @property
    def is_fallback(self) -> bool:
        return self._primary is None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        if self._primary is not None:
            return await self._primary.find_by_id(user_id)
        if user_id == demo_data.DEMO_USER_ID:
            return await asyncio.to_thread(demo_data.demo_user)
        return None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        if self._primary is not None:
            return await self._primary.find_by_email(email)
        value = email.value if isinstance(email, Email) else normalize_email(email)
        if value == demo_data.DEMO_USER_EMAIL:
            return await asyncio.to_thread(demo_data.demo_user)
        return None

    async def create(self, user: User) -> User:
        if self._primary is None:
            raise _unavailable("user creation")
        return await self._primary.create(user)

    async def count(self) -> int:
        if self._primary is not None:
            return await self._primary.count()
        return 1


class FallbackProviderRepository(ProviderRepository):
    def __init__(self, primary: Optional[ProviderRepository]):
        self._primary = primary

    @property
    def is_fallback(self) -> bool:
        return self._primary is None

    async def list_all(self) -> list[Provider]:
        if self._primary is not None:
            return await self._primary.list_all()
        return demo_data.mock_providers()

    async def find_by_id(self, provider_id: str) -> Optional[Provider]:
        if self._primary is not None:
            return await self._primary.find_by_id(provider_id)
        for provider in demo_data.mock_providers():
            if provider.id == provider_id:
                return provider
        return None

    async def create(self, provider: Provider) -> Provider:
        if self._primary is None:
            raise _unavailable("provider creation")
        return await self._primary.create(provider)


class FallbackBookingRepository(BookingRepository):
    def __init__(self, primary: Optional[BookingRepository]):
        self._primary = primary

    @property
    def is_fallback(self) -> bool:
        return self._primary is None

    async def list_for_user(self, user_id: str) -> list[Booking]:
        if self._primary is not None:
            return await self._primary.list_for_user(user_id)
        return []

    async def create(self, booking: Booking) -> Booking:
        if self._primary is None:
            raise _unavailable("booking creation")
        return await self._primary.create(booking)
