"""Marketplace repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from vecino.domain.marketplace.booking import Booking
from vecino.domain.marketplace.provider import Provider


class ProviderRepository(ABC):
    """Repository interface for provider listings."""

    @abstractmethod
    async def list_all(self) -> list[Provider]:
        """List every provider."""

    @abstractmethod
    async def find_by_id(self, provider_id: str) -> Optional[Provider]:
        """Find a provider by its ID."""

    @abstractmethod
    async def create(self, provider: Provider) -> Provider:
        """Insert a new provider."""


class BookingRepository(ABC):
    """Repository interface for bookings."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Booking]:
        """Bookings made by a user, newest first."""

    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """Insert a new booking."""
