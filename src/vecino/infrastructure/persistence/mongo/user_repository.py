"""MongoDB implementation of UserRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from pymongo.errors import DuplicateKeyError

from vecino.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
    normalize_email,
)
from vecino.infrastructure.persistence.mongo.connection import USERS
from vecino.infrastructure.persistence.mongo.documents import (
    to_object_id,
    user_from_document,
    user_to_document,
)

if TYPE_CHECKING:
    from vecino.infrastructure.persistence.mongo.connection import MongoConnection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """Users stored in the ``users`` collection, unique on ``email``."""

    def __init__(self, connection: MongoConnection):
        self._collection = connection.collection(USERS)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        doc = await self._collection.find_one({"_id": object_id})
        return user_from_document(doc) if doc else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        value = email.value if isinstance(email, Email) else normalize_email(email)
        doc = await self._collection.find_one({"email": value})
        return user_from_document(doc) if doc else None

    async def create(self, user: User) -> User:
        try:
            await self._collection.insert_one(user_to_document(user))
        except DuplicateKeyError:
            raise EmailAlreadyExistsError(user.email) from None
        logger.debug("Inserted user %s", user.id)
        return user

    async def count(self) -> int:
        return await self._collection.count_documents({})
