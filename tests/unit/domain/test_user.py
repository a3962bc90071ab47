"""Unit tests for the User aggregate."""

import pytest

from tests.shared.fixtures import FAKE_HASH
from vecino.domain.user import DEFAULT_NEIGHBORHOOD, Neighborhood, User, UserRole
from vecino.domain.user.aggregates import DEFAULT_ADDRESS, DEFAULT_PHONE, DEFAULT_UNIT_NUMBER


class TestUser:
    """Tests for User construction and invariants."""

    def test_create_fills_defaults(self):
        user = User.create(name="  Ana ", email="A@X.com", password_hash=FAKE_HASH)

        assert user.name == "Ana"
        assert user.email == "a@x.com"
        assert user.role == UserRole.USER
        assert user.phone == DEFAULT_PHONE
        assert user.address == DEFAULT_ADDRESS
        assert user.unit_number == DEFAULT_UNIT_NUMBER
        assert user.neighborhood == DEFAULT_NEIGHBORHOOD
        assert user.is_verified is False
        assert user.favorites == []
        assert len(user.id) == 24
        assert user.created_at.tzinfo is not None

    def test_plaintext_password_rejected(self):
        with pytest.raises(ValueError, match="bcrypt"):
            User(name="Ana", email="ana@example.com", password_hash="secret1")

    def test_role_and_neighborhood_from_strings(self):
        user = User(
            name="Pablo",
            email="pablo@example.com",
            password_hash=FAKE_HASH,
            role="provider",
            neighborhood="Pocitos",
        )

        assert user.role is UserRole.PROVIDER
        assert user.is_provider
        assert not user.is_admin
        assert user.neighborhood is Neighborhood.POCITOS

    def test_token_claims(self):
        user = User.create(
            name="Ana",
            email="ana@example.com",
            password_hash=FAKE_HASH,
            neighborhood="Malvín",
        )

        assert user.token_claims() == {"email": "ana@example.com", "neighborhood": "Malvín"}

    def test_equality_by_id(self):
        a = User(name="Ana", email="ana@example.com", password_hash=FAKE_HASH, id="a" * 24)
        b = User(name="Other", email="o@example.com", password_hash=FAKE_HASH, id="a" * 24)

        assert a == b
        assert len({a, b}) == 1

    def test_repr_omits_password_hash(self):
        user = User.create(name="Ana", email="ana@example.com", password_hash=FAKE_HASH)

        assert FAKE_HASH not in repr(user)
