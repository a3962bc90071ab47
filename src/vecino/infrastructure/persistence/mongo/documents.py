"""Conversions between domain objects and MongoDB documents."""

from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

from vecino.domain.marketplace import (
    Booking,
    BookingStatus,
    Contact,
    Provider,
    ServiceOffering,
)
from vecino.domain.shared.time import date_to_utc_datetime, ensure_tz_aware
from vecino.domain.user import User


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """ObjectId for a 24-hex string; None for anything else."""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def _id_or_none(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def user_to_document(user: User) -> dict[str, Any]:
    return {
        "_id": ObjectId(user.id),
        "name": user.name,
        "email": user.email,
        "password_hash": user.password_hash,
        "phone": user.phone,
        "role": user.role.value,
        "neighborhood": user.neighborhood.value,
        "address": user.address,
        "unit_number": user.unit_number,
        "is_verified": user.is_verified,
        "profile_image": user.profile_image,
        "favorites": [ObjectId(f) for f in user.favorites if to_object_id(f)],
        "created_at": user.created_at,
    }


def user_from_document(doc: dict[str, Any]) -> User:
    return User.reconstitute(
        id=str(doc["_id"]),
        name=doc["name"],
        email=doc["email"],
        password_hash=doc["password_hash"],
        phone=doc.get("phone", ""),
        role=doc.get("role", "user"),
        neighborhood=doc.get("neighborhood", "La Taona"),
        address=doc.get("address", ""),
        unit_number=doc.get("unit_number", ""),
        is_verified=doc.get("is_verified", False),
        profile_image=doc.get("profile_image", ""),
        favorites=[str(f) for f in doc.get("favorites", [])],
        created_at=ensure_tz_aware(doc["created_at"]),
    )


def provider_to_document(provider: Provider) -> dict[str, Any]:
    return {
        "_id": ObjectId(provider.id),
        "user_id": to_object_id(provider.user_id),
        "business_name": provider.business_name,
        "description": provider.description,
        "categories": list(provider.categories),
        "neighborhoods_covered": list(provider.neighborhoods_covered),
        "services": [service.to_dict() for service in provider.services],
        "rating": provider.rating,
        "total_reviews": provider.total_reviews,
        "is_verified": provider.is_verified,
        "is_premium": provider.is_premium,
        "contact": provider.contact.to_dict(),
        "photos": list(provider.photos),
        "created_at": provider.created_at,
    }


def provider_from_document(doc: dict[str, Any]) -> Provider:
    return Provider(
        id=str(doc["_id"]),
        user_id=_id_or_none(doc.get("user_id")),
        business_name=doc["business_name"],
        description=doc.get("description", ""),
        categories=list(doc.get("categories", [])),
        neighborhoods_covered=list(doc.get("neighborhoods_covered", [])),
        services=[ServiceOffering.from_dict(s) for s in doc.get("services", [])],
        rating=float(doc.get("rating", 0)),
        total_reviews=int(doc.get("total_reviews", 0)),
        is_verified=doc.get("is_verified", False),
        is_premium=doc.get("is_premium", False),
        contact=Contact.from_dict(doc.get("contact")),
        photos=list(doc.get("photos", [])),
        created_at=ensure_tz_aware(doc["created_at"]),
    )


def booking_to_document(booking: Booking) -> dict[str, Any]:
    return {
        "_id": ObjectId(booking.id),
        "user_id": ObjectId(booking.user_id),
        "provider_id": ObjectId(booking.provider_id),
        "service_name": booking.service_name,
        "date": date_to_utc_datetime(booking.date),
        "time": booking.time,
        "address": booking.address,
        "price": booking.price,
        "status": booking.status.value,
        "created_at": booking.created_at,
    }


def booking_from_document(doc: dict[str, Any]) -> Booking:
    return Booking(
        id=str(doc["_id"]),
        user_id=str(doc["user_id"]),
        provider_id=str(doc["provider_id"]),
        service_name=doc["service_name"],
        date=ensure_tz_aware(doc["date"]).date(),
        time=doc["time"],
        address=doc["address"],
        price=float(doc["price"]),
        status=BookingStatus(doc.get("status", BookingStatus.PENDING.value)),
        created_at=ensure_tz_aware(doc["created_at"]),
    )
