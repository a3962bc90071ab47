"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from vecino.domain.user import UserRole
from vecino_auth import ExpiredTokenError, InvalidTokenError, JWTService

START = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class MovableClock:
    """A clock tests can advance by hand."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class TestJWTService:
    """Tests for JWT token creation and verification."""

    def setup_method(self):
        self.clock = MovableClock()
        self.service = JWTService(secret_key="test-signing-key-0123456789", clock=self.clock)
        self.user_id = "aaaaaaaaaaaaaaaaaaaaaaaa"

    def test_create_token(self):
        """Test creating a session token."""
        token = self.service.create_token(self.user_id, "user")

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_verify_token_returns_claims(self):
        """Test that a fresh token verifies to its claims."""
        token = self.service.create_token(
            self.user_id,
            "provider",
            {"email": "ana@example.com", "neighborhood": "Pocitos"},
        )

        claims = self.service.verify_token(token)

        assert claims.user_id == self.user_id
        assert claims.role == "provider"
        assert claims.email == "ana@example.com"
        assert claims.neighborhood == "Pocitos"
        assert claims.expires_at - claims.issued_at == timedelta(days=7)

    def test_role_enum_is_stored_as_its_value(self):
        token = self.service.create_token(self.user_id, UserRole.ADMIN)

        assert self.service.verify_token(token).role == "admin"

    def test_token_is_valid_until_expiry(self):
        token = self.service.create_token(self.user_id, "user")

        self.clock.advance(days=7)

        assert self.service.verify_token(token).user_id == self.user_id

    def test_expired_token_rejected(self):
        """Test that a token past its expiry raises ExpiredTokenError."""
        token = self.service.create_token(self.user_id, "user")

        self.clock.advance(days=7, seconds=1)

        with pytest.raises(ExpiredTokenError):
            self.service.verify_token(token)

    def test_custom_expiry(self):
        token = self.service.create_token(
            self.user_id,
            "user",
            expires_delta=timedelta(minutes=5),
        )

        self.clock.advance(minutes=6)

        with pytest.raises(ExpiredTokenError):
            self.service.verify_token(token)

    def test_token_signed_with_other_secret_rejected(self):
        """Test that verification with wrong secret fails."""
        other = JWTService(secret_key="a-different-signing-key-xyz", clock=self.clock)
        token = other.create_token(self.user_id, "admin")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_tampered_payload_rejected(self):
        token = self.service.create_token(self.user_id, "user")
        header, payload, signature = token.split(".")
        forged = pyjwt.encode(
            {
                "sub": self.user_id,
                "role": "admin",
                "iat": START,
                "exp": START + timedelta(days=7),
            },
            "guessed-key",
            algorithm="HS256",
        ).split(".")[1]

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(f"{header}.{forged}.{signature}")

    def test_garbage_token_rejected(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not-a-jwt")

    def test_token_missing_role_rejected(self):
        token = pyjwt.encode(
            {"sub": self.user_id, "iat": START, "exp": START + timedelta(days=1)},
            "test-signing-key-0123456789",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_extra_claims_cannot_override_reserved(self):
        with pytest.raises(ValueError, match="reserved"):
            self.service.create_token(self.user_id, "user", {"role": "admin"})

    def test_none_extra_claims_are_dropped(self):
        token = self.service.create_token(self.user_id, "user", {"email": None})

        assert self.service.verify_token(token).email is None

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="")
