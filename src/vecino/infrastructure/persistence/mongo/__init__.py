"""MongoDB persistence (Motor)."""

from vecino.infrastructure.persistence.mongo.booking_repository import (
    MongoBookingRepository,
)
from vecino.infrastructure.persistence.mongo.connection import MongoConnection, mask_uri
from vecino.infrastructure.persistence.mongo.provider_repository import (
    MongoProviderRepository,
)
from vecino.infrastructure.persistence.mongo.user_repository import MongoUserRepository

__all__ = [
    "MongoBookingRepository",
    "MongoConnection",
    "MongoProviderRepository",
    "MongoUserRepository",
    "mask_uri",
]
