"""Demo data seeding for Vecino.

Writes the demo resident and one demo provider through the regular
repositories. Running it twice reuses the existing demo user and its
demo listing instead of creating duplicates.

Usage:
    vecino db seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from vecino.domain.marketplace import Provider
from vecino.domain.shared.exceptions import ServiceUnavailableError
from vecino.domain.user import User
from vecino_demo.data import (
    DEMO_USER,
    SEED_PROVIDER,
    build_provider,
)

if TYPE_CHECKING:
    from vecino.infrastructure.persistence.store import DataStore
    from vecino_auth import PasswordHashingService

logger = logging.getLogger(__name__)


async def create_demo_user(
    store: DataStore,
    password_service: PasswordHashingService,
) -> User:
    existing = await store.users.find_by_email(DEMO_USER.email)
    if existing is not None:
        logger.info("Demo user already exists: %s", existing.id)
        return existing

    password_hash = await asyncio.to_thread(password_service.hash, DEMO_USER.password)
    user = User.create(
        name=DEMO_USER.name,
        email=DEMO_USER.email,
        password_hash=password_hash,
        phone=DEMO_USER.phone,
        neighborhood=DEMO_USER.neighborhood,
        address=DEMO_USER.address,
        unit_number=DEMO_USER.unit_number,
        is_verified=True,
    )
    logger.info("Creating demo user: %s", DEMO_USER.email)
    return await store.users.create(user)


async def create_demo_provider(store: DataStore, owner: User) -> Provider:
    for provider in await store.providers.list_all():
        if (
            provider.user_id == owner.id
            and provider.business_name == SEED_PROVIDER.business_name
        ):
            logger.info("Demo provider already exists: %s", provider.id)
            return provider

    logger.info("Creating demo provider: %s", SEED_PROVIDER.business_name)
    return await store.providers.create(build_provider(SEED_PROVIDER, owner.id))


async def seed_demo_data(
    store: DataStore,
    password_service: PasswordHashingService,
) -> tuple[User, Provider]:
    """Insert the demo user and provider.

    Raises
    ------
    ServiceUnavailableError
        If the store is serving mock data
    """
    if not store.is_available:
        raise ServiceUnavailableError

    user = await create_demo_user(store, password_service)
    provider = await create_demo_provider(store, user)
    return user, provider
