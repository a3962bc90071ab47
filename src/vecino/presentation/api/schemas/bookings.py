"""Booking schemas."""

from datetime import date as date_type
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from vecino.domain.marketplace import Booking
from vecino.presentation.api.schemas.common import CamelModel


class CreateBookingRequest(CamelModel):
    """Request schema for booking a provider's service."""

    provider_id: Optional[str] = None
    service_name: Optional[str] = None
    date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    time: Optional[str] = Field(default=None, description="HH:MM")
    address: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "providerId": "64b000000000000000000001",
                "serviceName": "Mantenimiento mensual",
                "date": "2025-03-14",
                "time": "09:30",
                "address": "Calle Principal 123",
                "price": 3500,
            },
        },
    )


class BookingResponse(CamelModel):
    id: str
    user_id: str
    provider_id: str
    service_name: str
    date: date_type
    time: str
    address: str
    price: float
    status: str
    created_at: datetime

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            provider_id=booking.provider_id,
            service_name=booking.service_name,
            date=booking.date,
            time=booking.time,
            address=booking.address,
            price=booking.price,
            status=booking.status.value,
            created_at=booking.created_at,
        )


class BookingListResponse(CamelModel):
    success: bool = True
    count: int
    data: list[BookingResponse]


class BookingCreatedResponse(CamelModel):
    success: bool = True
    message: str
    data: BookingResponse
