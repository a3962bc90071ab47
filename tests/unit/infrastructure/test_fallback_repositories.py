"""Unit tests for the mock-data fallback repositories."""

import threading

import pytest

from tests.shared.fixtures import (
    FAKE_HASH,
    InMemoryUserRepository,
    TestProviderFactory,
    TestUserFactory,
    booking_for_user,
)
from vecino.domain.shared import ServiceUnavailableError
from vecino.domain.user import User
from vecino.infrastructure.persistence.fallback import (
    FallbackBookingRepository,
    FallbackProviderRepository,
    FallbackUserRepository,
)
from vecino_auth import PasswordHashingService
from vecino_demo import data as demo_data
from vecino_demo.data import DEMO_USER_EMAIL, DEMO_USER_ID, DEMO_USER_PASSWORD


class TestFallbackUserRepository:
    """Without a database, reads serve the demo resident and writes fail."""

    def setup_method(self):
        self.repo = FallbackUserRepository(None)

    def test_is_fallback(self):
        assert self.repo.is_fallback
        assert not FallbackUserRepository(InMemoryUserRepository()).is_fallback

    @pytest.mark.asyncio
    async def test_find_demo_user_by_email(self):
        user = await self.repo.find_by_email(" DEMO@lataona.com ")

        assert user.id == DEMO_USER_ID
        assert PasswordHashingService().verify(DEMO_USER_PASSWORD, user.password_hash)

    @pytest.mark.asyncio
    async def test_find_demo_user_by_id(self):
        assert (await self.repo.find_by_id(DEMO_USER_ID)).email == DEMO_USER_EMAIL
        assert await self.repo.find_by_id("f" * 24) is None

    @pytest.mark.asyncio
    async def test_demo_hash_built_off_the_event_loop(self, monkeypatch):
        threads = []

        def fake_hash():
            threads.append(threading.get_ident())
            return FAKE_HASH

        monkeypatch.setattr(demo_data, "demo_password_hash", fake_hash)

        by_email = await self.repo.find_by_email(DEMO_USER_EMAIL)
        by_id = await self.repo.find_by_id(DEMO_USER_ID)

        assert by_email.password_hash == by_id.password_hash == FAKE_HASH
        assert len(threads) == 2
        assert threading.get_ident() not in threads

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        assert await self.repo.find_by_email("ana@example.com") is None

    @pytest.mark.asyncio
    async def test_count(self):
        assert await self.repo.count() == 1

    @pytest.mark.asyncio
    async def test_create_unavailable(self, caplog):
        user = User.create(name="Ana", email="ana@example.com", password_hash=FAKE_HASH)

        with pytest.raises(ServiceUnavailableError) as exc:
            await self.repo.create(user)

        assert exc.value.message == "Database not available"
        assert "user creation" in caplog.text

    @pytest.mark.asyncio
    async def test_delegates_to_primary(self):
        primary = InMemoryUserRepository([TestUserFactory.ana()])
        repo = FallbackUserRepository(primary)

        assert (await repo.find_by_email(TestUserFactory.ANA_EMAIL)).name == "Ana"
        assert await repo.find_by_email(DEMO_USER_EMAIL) is None
        assert await repo.count() == 1


class TestFallbackProviderRepository:
    def setup_method(self):
        self.repo = FallbackProviderRepository(None)

    @pytest.mark.asyncio
    async def test_list_mock_providers(self):
        providers = await self.repo.list_all()

        assert [p.business_name for p in providers] == [
            "Jardinería Elegante",
            "Chef a Domicilio",
        ]
        assert all(p.user_id == DEMO_USER_ID for p in providers)

    @pytest.mark.asyncio
    async def test_find_mock_provider(self):
        provider = await self.repo.find_by_id("64b000000000000000000002")

        assert provider.rating == 4.9
        assert await self.repo.find_by_id("f" * 24) is None

    @pytest.mark.asyncio
    async def test_create_unavailable(self):
        with pytest.raises(ServiceUnavailableError):
            await self.repo.create(TestProviderFactory.garden())


class TestFallbackBookingRepository:
    def setup_method(self):
        self.repo = FallbackBookingRepository(None)

    @pytest.mark.asyncio
    async def test_no_bookings(self):
        assert await self.repo.list_for_user(DEMO_USER_ID) == []

    @pytest.mark.asyncio
    async def test_create_unavailable(self):
        booking = booking_for_user(DEMO_USER_ID, "64b000000000000000000001")

        with pytest.raises(ServiceUnavailableError):
            await self.repo.create(booking)
