"""MongoDB implementation of ProviderRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from vecino.domain.marketplace import Provider, ProviderRepository
from vecino.infrastructure.persistence.mongo.connection import PROVIDERS
from vecino.infrastructure.persistence.mongo.documents import (
    provider_from_document,
    provider_to_document,
    to_object_id,
)

if TYPE_CHECKING:
    from vecino.infrastructure.persistence.mongo.connection import MongoConnection


class MongoProviderRepository(ProviderRepository):
    def __init__(self, connection: MongoConnection):
        self._collection = connection.collection(PROVIDERS)

    async def list_all(self) -> list[Provider]:
        cursor = self._collection.find({}).sort("created_at", 1)
        return [provider_from_document(doc) async for doc in cursor]

    async def find_by_id(self, provider_id: str) -> Optional[Provider]:
        object_id = to_object_id(provider_id)
        if object_id is None:
            return None
        doc = await self._collection.find_one({"_id": object_id})
        return provider_from_document(doc) if doc else None

    async def create(self, provider: Provider) -> Provider:
        await self._collection.insert_one(provider_to_document(provider))
        return provider
