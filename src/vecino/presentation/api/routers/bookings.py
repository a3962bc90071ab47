"""Booking router."""

from fastapi import APIRouter, status

from vecino.presentation.api.dependencies import BookingServiceDep, CurrentClaims
from vecino.presentation.api.schemas.bookings import (
    BookingCreatedResponse,
    BookingListResponse,
    BookingResponse,
    CreateBookingRequest,
)
from vecino.presentation.api.schemas.common import ErrorResponse

router = APIRouter()


@router.get(
    "",
    summary="List my bookings",
    responses={401: {"model": ErrorResponse, "description": "Missing or invalid token"}},
)
async def list_bookings(
    claims: CurrentClaims,
    booking_service: BookingServiceDep,
) -> BookingListResponse:
    bookings = await booking_service.list_for_user(claims.user_id)
    return BookingListResponse(
        count=len(bookings),
        data=[BookingResponse.from_domain(b) for b in bookings],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Book a service",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Provider not found"},
        503: {"model": ErrorResponse, "description": "Database not available"},
    },
)
async def create_booking(
    request: CreateBookingRequest,
    claims: CurrentClaims,
    booking_service: BookingServiceDep,
) -> BookingCreatedResponse:
    booking = await booking_service.create_booking(
        user_id=claims.user_id,
        provider_id=request.provider_id,
        service_name=request.service_name,
        date=request.date,
        time=request.time,
        address=request.address,
        price=request.price,
    )
    return BookingCreatedResponse(
        message="Booking created successfully",
        data=BookingResponse.from_domain(booking),
    )
