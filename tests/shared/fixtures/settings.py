"""Explicit settings for tests; never read from .env files."""

from vecino_config import Settings

TEST_JWT_SECRET = "api-tests-signing-key-0123456789"


def build_settings(**overrides) -> Settings:
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "mongodb_uri": "mongodb://localhost:27017",
        "mongodb_db": "vecino_test",
        "log_level": "WARNING",
        **overrides,
    }
    return Settings(_env_file=None, **values)
