"""
Test data factories for creating deterministic test entities.

Use fixed ids and predictable values to ensure reproducibility.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory

    def test_something():
        user = TestUserFactory.ana()
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from functools import lru_cache

from vecino.domain.marketplace import Booking, Provider, ServiceOffering
from vecino.domain.user import User, UserRole
from vecino_auth import PasswordHashingService

# Low work factor keeps hashing fast in tests
TEST_ROUNDS = 4

# Shaped like a bcrypt hash; verifies against nothing
FAKE_HASH = "$2b$04$" + "a" * 53

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@lru_cache(maxsize=None)
def hash_password(password: str) -> str:
    return PasswordHashingService(rounds=TEST_ROUNDS).hash(password)


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for creating test users with deterministic IDs."""

    __test__ = False

    ANA_ID = "aaaaaaaaaaaaaaaaaaaaaaaa"
    ANA_EMAIL = "ana@example.com"
    ANA_PASSWORD = "secret1"

    PROVIDER_ID = "bbbbbbbbbbbbbbbbbbbbbbbb"
    PROVIDER_EMAIL = "pablo@example.com"
    PROVIDER_PASSWORD = "jardin99"

    ADMIN_ID = "000000000000000000000001"
    ADMIN_EMAIL = "admin@example.com"
    ADMIN_PASSWORD = "admin-pass"

    @classmethod
    def ana(cls) -> User:
        """A resident with a real (fast) bcrypt hash."""
        return User(
            id=cls.ANA_ID,
            name="Ana",
            email=cls.ANA_EMAIL,
            password_hash=hash_password(cls.ANA_PASSWORD),
            role=UserRole.USER,
            created_at=FIXED_NOW,
        )

    @classmethod
    def provider(cls) -> User:
        return User(
            id=cls.PROVIDER_ID,
            name="Pablo",
            email=cls.PROVIDER_EMAIL,
            password_hash=hash_password(cls.PROVIDER_PASSWORD),
            role=UserRole.PROVIDER,
            neighborhood="Pocitos",
            created_at=FIXED_NOW,
        )

    @classmethod
    def admin(cls) -> User:
        return User(
            id=cls.ADMIN_ID,
            name="Admin",
            email=cls.ADMIN_EMAIL,
            password_hash=hash_password(cls.ADMIN_PASSWORD),
            role=UserRole.ADMIN,
            created_at=FIXED_NOW,
        )


@dataclass(frozen=True)
class TestProviderFactory:
    __test__ = False

    GARDEN_ID = "cccccccccccccccccccccccc"

    @classmethod
    def garden(cls) -> Provider:
        return Provider(
            id=cls.GARDEN_ID,
            user_id=TestUserFactory.PROVIDER_ID,
            business_name="Jardines del Este",
            description="Mantenimiento de jardines",
            categories=["Jardinería"],
            neighborhoods_covered=["La Taona"],
            services=[ServiceOffering(name="Corte de césped", price=1200)],
            created_at=FIXED_NOW,
        )


def booking_for_user(user_id: str, provider_id: str) -> Booking:
    return Booking(
        id="dddddddddddddddddddddddd",
        user_id=user_id,
        provider_id=provider_id,
        service_name="Corte de césped",
        date=date(2025, 3, 14),
        time="09:30",
        address="Calle Principal 123",
        price=1200.0,
        created_at=FIXED_NOW,
    )
