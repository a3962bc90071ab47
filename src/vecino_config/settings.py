"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. VECINO_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, ValidationError, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Values shipped in example .env files; a server must never sign tokens with them
PLACEHOLDER_SECRETS = frozenset(
    {
        "changeme",
        "change-me",
        "change_me",
        "secret",
        "jwt_secret",
        "your-secret-key",
        "your_secret_key",
        "your-jwt-secret",
        "replace-me",
    },
)
PLACEHOLDER_MARKERS = ("tu_secreto", "changeme", "change_me", "placeholder")

# HS256 digest size
MIN_JWT_SECRET_LENGTH = 32

DEFAULT_CORS_ORIGINS = (
    "http://127.0.0.1:5500,http://localhost:5500,"
    "http://127.0.0.1:8080,http://localhost:8080,"
    "http://localhost:3000,http://127.0.0.1:3000"
)


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. VECINO_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("VECINO_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


def is_placeholder_secret(value: str) -> bool:
    """Return True for empty secrets and well-known example values."""
    normalized = value.strip().lower()
    if not normalized:
        return True
    if normalized in PLACEHOLDER_SECRETS:
        return True
    return any(marker in normalized for marker in PLACEHOLDER_MARKERS)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app refuses to start without these)
    jwt_secret: SecretStr  # Secret for signing session tokens
    mongodb_uri: SecretStr  # Connection string, may embed credentials

    # Application
    app_name: str = "Marketplace Barrios Privados"

    # Database (MONGODB_ prefix)
    mongodb_db: str = "vecino"
    mongodb_timeout_ms: int = 5000

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_debug: bool = False
    api_cors_origins: str = DEFAULT_CORS_ORIGINS

    # JWT
    jwt_expire_days: int = 7

    # Demo data
    demo_seed_enabled: bool = False

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("jwt_secret")
    @classmethod
    def _reject_placeholder_secret(cls, v: SecretStr) -> SecretStr:
        if is_placeholder_secret(v.get_secret_value()):
            msg = "JWT_SECRET is missing or still set to a placeholder value"
            raise ValueError(msg)
        if len(v.get_secret_value().strip()) < MIN_JWT_SECRET_LENGTH:
            msg = f"JWT_SECRET must be at least {MIN_JWT_SECRET_LENGTH} characters"
            raise ValueError(msg)
        return v

    @field_validator("mongodb_uri")
    @classmethod
    def _validate_mongodb_uri(cls, v: SecretStr) -> SecretStr:
        uri = v.get_secret_value().strip()
        if not uri.startswith(("mongodb://", "mongodb+srv://")):
            msg = "MONGODB_URI must start with mongodb:// or mongodb+srv://"
            raise ValueError(msg)
        return SecretStr(uri)

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    Required fields (jwt_secret, mongodb_uri) must be provided via
    environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def load_settings_or_exit() -> Settings:
    """Load settings, terminating the process when they are unusable.

    A missing or placeholder signing secret is a fatal configuration
    error: the server must not start half-configured.
    """
    try:
        return get_settings()
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]).upper()
            logger.critical("Invalid configuration for %s: %s", field, error["msg"])
        raise SystemExit(1) from None


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
