"""MongoDB implementation of BookingRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vecino.domain.marketplace import Booking, BookingRepository
from vecino.infrastructure.persistence.mongo.connection import BOOKINGS
from vecino.infrastructure.persistence.mongo.documents import (
    booking_from_document,
    booking_to_document,
    to_object_id,
)

if TYPE_CHECKING:
    from vecino.infrastructure.persistence.mongo.connection import MongoConnection


class MongoBookingRepository(BookingRepository):
    def __init__(self, connection: MongoConnection):
        self._collection = connection.collection(BOOKINGS)

    async def list_for_user(self, user_id: str) -> list[Booking]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return []
        cursor = self._collection.find({"user_id": object_id}).sort("created_at", -1)
        return [booking_from_document(doc) async for doc in cursor]

    async def create(self, booking: Booking) -> Booking:
        await self._collection.insert_one(booking_to_document(booking))
        return booking
