"""Unit tests for domain and MongoDB document conversions."""

from datetime import date, datetime, timezone

from bson import ObjectId

from tests.shared.fixtures import TestProviderFactory, TestUserFactory, booking_for_user
from vecino.domain.marketplace import BookingStatus
from vecino.infrastructure.persistence.mongo.documents import (
    booking_from_document,
    booking_to_document,
    provider_from_document,
    provider_to_document,
    to_object_id,
    user_from_document,
    user_to_document,
)


def test_to_object_id():
    assert to_object_id("64a000000000000000000001") == ObjectId("64a000000000000000000001")
    assert to_object_id("not-an-id") is None
    assert to_object_id(None) is None


class TestUserDocument:
    def test_stored_fields(self):
        doc = user_to_document(TestUserFactory.ana())

        assert doc["_id"] == ObjectId(TestUserFactory.ANA_ID)
        assert doc["role"] == "user"
        assert doc["neighborhood"] == "La Taona"
        assert doc["password_hash"].startswith("$2b$")

    def test_naive_timestamps_read_as_utc(self):
        doc = user_to_document(TestUserFactory.ana())
        doc["created_at"] = datetime(2025, 3, 1, 12, 0)

        user = user_from_document(doc)

        assert user.created_at == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert user.id == TestUserFactory.ANA_ID


class TestProviderDocument:
    def test_owner_and_services(self):
        doc = provider_to_document(TestProviderFactory.garden())

        assert doc["user_id"] == ObjectId(TestUserFactory.PROVIDER_ID)
        assert doc["services"][0] == {
            "name": "Corte de césped",
            "price": 1200,
            "description": None,
            "duration": None,
            "category": None,
        }

    def test_reads_listing_without_owner(self):
        doc = provider_to_document(TestProviderFactory.garden())
        doc["user_id"] = None

        provider = provider_from_document(doc)

        assert provider.user_id is None
        assert provider.services[0].name == "Corte de césped"


class TestBookingDocument:
    def test_date_stored_as_utc_midnight(self):
        booking = booking_for_user(TestUserFactory.ANA_ID, TestProviderFactory.GARDEN_ID)

        doc = booking_to_document(booking)

        assert doc["date"] == datetime(2025, 3, 14, tzinfo=timezone.utc)
        assert doc["status"] == "pendiente"

    def test_read_back(self):
        doc = booking_to_document(
            booking_for_user(TestUserFactory.ANA_ID, TestProviderFactory.GARDEN_ID),
        )
        doc["status"] = "confirmado"

        booking = booking_from_document(doc)

        assert booking.date == date(2025, 3, 14)
        assert booking.status is BookingStatus.CONFIRMED
        assert booking.provider_id == TestProviderFactory.GARDEN_ID
