"""The repositories a request handler works with."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from vecino.infrastructure.persistence.fallback import (
    FallbackBookingRepository,
    FallbackProviderRepository,
    FallbackUserRepository,
)
from vecino.infrastructure.persistence.mongo import (
    MongoBookingRepository,
    MongoConnection,
    MongoProviderRepository,
    MongoUserRepository,
)

logger = logging.getLogger(__name__)

SOURCE_DATABASE = "database"
SOURCE_MOCK = "mock"


@dataclass(frozen=True)
class DataStore:
    """Fallback-wrapped repositories plus the connection behind them.

    Built once at startup; ``source`` tells whether reads come from the
    database or from the mock dataset.
    """

    users: FallbackUserRepository
    providers: FallbackProviderRepository
    bookings: FallbackBookingRepository
    connection: Optional[MongoConnection] = None

    @property
    def is_available(self) -> bool:
        return not self.users.is_fallback

    @property
    def source(self) -> str:
        return SOURCE_DATABASE if self.is_available else SOURCE_MOCK

    @classmethod
    def from_connection(cls, connection: Optional[MongoConnection]) -> DataStore:
        if connection is None or not connection.is_connected:
            logger.warning("Database unavailable: reads use mock data, writes fail")
            return cls.unavailable(connection)

        return cls(
            users=FallbackUserRepository(MongoUserRepository(connection)),
            providers=FallbackProviderRepository(MongoProviderRepository(connection)),
            bookings=FallbackBookingRepository(MongoBookingRepository(connection)),
            connection=connection,
        )

    @classmethod
    def unavailable(cls, connection: Optional[MongoConnection] = None) -> DataStore:
        return cls(
            users=FallbackUserRepository(None),
            providers=FallbackProviderRepository(None),
            bookings=FallbackBookingRepository(None),
            connection=connection,
        )
