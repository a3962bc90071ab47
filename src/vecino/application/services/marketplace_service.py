"""Provider listing and booking use cases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from vecino.domain.marketplace import (
    Booking,
    Contact,
    Provider,
    ProviderNotFoundError,
    ServiceOffering,
    parse_booking_date,
    validate_booking,
    validate_provider,
)

if TYPE_CHECKING:
    from vecino.domain.marketplace import BookingRepository, ProviderRepository

logger = logging.getLogger(__name__)


class ProviderService:
    """Browse and publish provider listings."""

    def __init__(self, provider_repository: ProviderRepository):
        self._provider_repo = provider_repository

    async def list_providers(self) -> list[Provider]:
        return await self._provider_repo.list_all()

    async def get_provider(self, provider_id: str) -> Provider:
        provider = await self._provider_repo.find_by_id(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)
        return provider

    async def create_provider(  # NOQA: PLR0913
        self,
        owner_id: str,
        business_name: Optional[str],
        description: Optional[str],
        categories: Optional[list[str]] = None,
        neighborhoods_covered: Optional[list[str]] = None,
        services: Optional[list[dict[str, Any]]] = None,
        contact: Optional[dict[str, Any]] = None,
        photos: Optional[list[str]] = None,
    ) -> Provider:
        validate_provider(
            business_name,
            description,
            categories,
            neighborhoods_covered,
            services,
        ).raise_if_invalid()

        provider = Provider.create(
            user_id=owner_id,
            business_name=business_name,
            description=description,
            categories=categories or [],
            neighborhoods_covered=neighborhoods_covered,
            services=[ServiceOffering.from_dict(s) for s in services or []],
            contact=Contact.from_dict(contact),
            photos=photos,
        )
        provider = await self._provider_repo.create(provider)

        logger.info("Provider %s created by user %s", provider.id, owner_id)
        return provider


class BookingService:
    """Book a provider's service and list a resident's bookings."""

    def __init__(
        self,
        booking_repository: BookingRepository,
        provider_repository: ProviderRepository,
    ):
        self._booking_repo = booking_repository
        self._provider_repo = provider_repository

    async def list_for_user(self, user_id: str) -> list[Booking]:
        return await self._booking_repo.list_for_user(user_id)

    async def create_booking(  # NOQA: PLR0913
        self,
        user_id: str,
        provider_id: Optional[str],
        service_name: Optional[str],
        date: Any,
        time: Optional[str],
        address: Optional[str],
        price: Any,
    ) -> Booking:
        validate_booking(
            provider_id,
            service_name,
            date,
            time,
            address,
            price,
        ).raise_if_invalid()

        provider = await self._provider_repo.find_by_id(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)

        booking = Booking.create(
            user_id=user_id,
            provider_id=provider.id,
            service_name=service_name,
            date=parse_booking_date(date),
            time=time.strip(),
            address=address,
            price=price,
        )
        booking = await self._booking_repo.create(booking)

        logger.info(
            "Booking %s created: user %s, provider %s",
            booking.id,
            user_id,
            provider.id,
        )
        return booking
