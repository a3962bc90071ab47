"""Unit tests for application settings."""

import logging

import pytest
from pydantic import ValidationError

from vecino_config import (
    Settings,
    get_settings,
    is_placeholder_secret,
    load_settings_or_exit,
)

VALID_SECRET = "k3y-for-tests-0123456789abcdef-settings"
VALID_URI = "mongodb://localhost:27017"


def _settings(**overrides) -> Settings:
    values = {"jwt_secret": VALID_SECRET, "mongodb_uri": VALID_URI, **overrides}
    return Settings(_env_file=None, **values)


class TestSettings:
    def test_defaults(self):
        settings = _settings()

        assert settings.mongodb_db == "vecino"
        assert settings.api_port == 5000
        assert settings.jwt_expire_days == 7
        assert settings.demo_seed_enabled is False

    def test_secrets_are_masked_in_repr(self):
        settings = _settings()

        assert VALID_SECRET not in repr(settings)
        assert settings.jwt_secret.get_secret_value() == VALID_SECRET

    @pytest.mark.parametrize(
        "secret",
        ["", "   ", "changeme", "SECRET", "tu_secreto_jwt_aqui", "your-secret-key"],
    )
    def test_placeholder_secret_rejected(self, secret):
        with pytest.raises(ValidationError, match="placeholder"):
            _settings(jwt_secret=secret)

    @pytest.mark.parametrize("secret", ["x", "s3cr3t-k3y-9f2a", "a" * 31])
    def test_short_secret_rejected(self, secret):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            _settings(jwt_secret=secret)

    def test_secret_at_minimum_length_accepted(self):
        assert _settings(jwt_secret="a" * 32).jwt_secret.get_secret_value() == "a" * 32

    def test_mongodb_uri_scheme_required(self):
        with pytest.raises(ValidationError, match="mongodb://"):
            _settings(mongodb_uri="postgresql://localhost/db")

    def test_srv_uri_accepted_and_trimmed(self):
        settings = _settings(mongodb_uri="  mongodb+srv://user:pw@cluster.example.net  ")

        assert settings.mongodb_uri.get_secret_value() == "mongodb+srv://user:pw@cluster.example.net"

    def test_cors_origins_parsed(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_list(self):
        settings = _settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.api_cors_origins == "http://a.test,http://b.test"


def test_is_placeholder_secret():
    assert is_placeholder_secret("changeme")
    assert not is_placeholder_secret(VALID_SECRET)


class TestLoadSettingsOrExit:
    def test_returns_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", VALID_SECRET)
        monkeypatch.setenv("MONGODB_URI", VALID_URI)
        monkeypatch.setenv("API_PORT", "8123")

        settings = load_settings_or_exit()

        assert settings.api_port == 8123
        assert get_settings() is settings

    def test_placeholder_secret_terminates(self, monkeypatch, caplog):
        monkeypatch.setenv("JWT_SECRET", "changeme")
        monkeypatch.setenv("MONGODB_URI", VALID_URI)

        with caplog.at_level(logging.CRITICAL), pytest.raises(SystemExit) as exc:
            load_settings_or_exit()

        assert exc.value.code == 1
        assert "JWT_SECRET" in caplog.text
