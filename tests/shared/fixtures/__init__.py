"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.factories import (
    FAKE_HASH,
    TestProviderFactory,
    TestUserFactory,
    booking_for_user,
    hash_password,
)
from tests.shared.fixtures.repositories import (
    InMemoryBookingRepository,
    InMemoryProviderRepository,
    InMemoryUserRepository,
    in_memory_store,
)

__all__ = [
    "FAKE_HASH",
    "InMemoryBookingRepository",
    "InMemoryProviderRepository",
    "InMemoryUserRepository",
    "TestProviderFactory",
    "TestUserFactory",
    "booking_for_user",
    "hash_password",
    "in_memory_store",
]
