"""Application layer services."""

from vecino.application.services.authentication_service import AuthenticationService
from vecino.application.services.marketplace_service import (
    BookingService,
    ProviderService,
)

__all__ = ["AuthenticationService", "BookingService", "ProviderService"]
