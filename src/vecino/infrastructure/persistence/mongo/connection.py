"""Motor connection lifecycle for the marketplace database.

One ``MongoConnection`` is created in the application lifespan and
closed at shutdown. ``connect`` never raises: an unreachable server
leaves the connection unavailable and the API falls back to mock data.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

USERS = "users"
PROVIDERS = "providers"
BOOKINGS = "bookings"

SOCKET_TIMEOUT_MS = 45000

_PASSWORD_IN_URI = re.compile(r":[^:@/]+@")


def mask_uri(uri: str) -> str:
    """Hide the password of a connection string for logging."""
    return _PASSWORD_IN_URI.sub(":****@", uri)


class MongoConnection:
    """Async MongoDB connection with explicit availability state."""

    def __init__(self, uri: str, db_name: str, timeout_ms: int = 5000):
        """No connection is made until connect()."""
        self._uri = uri
        self._db_name = db_name
        self._timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    def from_settings(cls, settings) -> MongoConnection:
        return cls(
            uri=settings.mongodb_uri.get_secret_value(),
            db_name=settings.mongodb_db,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    @property
    def db_name(self) -> str:
        return self._db_name

    @property
    def masked_uri(self) -> str:
        return mask_uri(self._uri)

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def collection(self, name: str) -> AsyncIOMotorCollection:
        if self._db is None:
            msg = "Database not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._db[name]

    async def connect(self) -> bool:
        """Open the client, ping the server and ensure indexes.

        Returns
        -------
        True when the database is usable, False otherwise
        """
        if self._db is not None:
            return True

        logger.info("Connecting to MongoDB at %s", self.masked_uri)
        client: Optional[AsyncIOMotorClient] = None
        try:
            client = AsyncIOMotorClient(
                self._uri,
                serverSelectionTimeoutMS=self._timeout_ms,
                connectTimeoutMS=self._timeout_ms,
                socketTimeoutMS=SOCKET_TIMEOUT_MS,
                tz_aware=True,
            )
            db = client[self._db_name]
            await client.admin.command("ping")
            await db[USERS].create_index("email", unique=True)
            await db[PROVIDERS].create_index("user_id")
            await db[BOOKINGS].create_index([("user_id", 1), ("created_at", -1)])
        except PyMongoError as e:
            logger.warning("MongoDB unavailable (%s); serving mock data", e)
            if client is not None:
                client.close()
            return False

        self._client = client
        self._db = db
        logger.info("Connected to MongoDB database '%s'", self._db_name)
        return True

    async def health_check(self) -> dict[str, Any]:
        """Report reachability of an open connection; safe to call repeatedly.

        Never opens a connection itself, so a process running on mock data
        keeps reporting itself as disconnected.
        """
        report: dict[str, Any] = {
            "connected": False,
            "database": self._db_name,
            "host": None,
            "collections": [],
        }
        if self._client is None:
            return report

        try:
            await self._client.admin.command("ping")
            report["collections"] = sorted(await self._db.list_collection_names())
            address = self._client.address
        except PyMongoError as e:
            logger.warning("MongoDB health check failed: %s", e)
            return report

        report["connected"] = True
        report["host"] = f"{address[0]}:{address[1]}" if address else None
        return report

    async def drop_database(self) -> None:
        if self._client is None:
            msg = "Database not connected. Call connect() first."
            raise RuntimeError(msg)
        await self._client.drop_database(self._db_name)
        logger.info("Dropped database '%s'", self._db_name)

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None
