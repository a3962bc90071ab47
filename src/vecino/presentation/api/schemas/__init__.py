"""Pydantic request/response schemas for the API."""

from vecino.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserResponse,
)
from vecino.presentation.api.schemas.bookings import (
    BookingCreatedResponse,
    BookingListResponse,
    BookingResponse,
    CreateBookingRequest,
)
from vecino.presentation.api.schemas.common import (
    CamelModel,
    DatabaseStatus,
    ErrorResponse,
    HealthResponse,
    StatusResponse,
)
from vecino.presentation.api.schemas.providers import (
    CreateProviderRequest,
    ProviderDetailResponse,
    ProviderListResponse,
    ProviderResponse,
)

__all__ = [
    "AuthResponse",
    "BookingCreatedResponse",
    "BookingListResponse",
    "BookingResponse",
    "CamelModel",
    "CreateBookingRequest",
    "CreateProviderRequest",
    "DatabaseStatus",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "ProfileResponse",
    "ProviderDetailResponse",
    "ProviderListResponse",
    "ProviderResponse",
    "RegisterRequest",
    "StatusResponse",
    "UserResponse",
]
