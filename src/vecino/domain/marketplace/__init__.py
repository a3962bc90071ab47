"""Marketplace domain: provider listings and bookings."""

from vecino.domain.marketplace.booking import Booking
from vecino.domain.marketplace.exceptions import ProviderNotFoundError
from vecino.domain.marketplace.provider import Provider
from vecino.domain.marketplace.repositories import BookingRepository, ProviderRepository
from vecino.domain.marketplace.validation import (
    parse_booking_date,
    validate_booking,
    validate_provider,
)
from vecino.domain.marketplace.value_objects import (
    BookingStatus,
    Contact,
    CoverageArea,
    ServiceCategory,
    ServiceOffering,
)

__all__ = [
    "Booking",
    "BookingRepository",
    "BookingStatus",
    "Contact",
    "CoverageArea",
    "Provider",
    "ProviderNotFoundError",
    "ProviderRepository",
    "ServiceCategory",
    "ServiceOffering",
    "parse_booking_date",
    "validate_booking",
    "validate_provider",
]
