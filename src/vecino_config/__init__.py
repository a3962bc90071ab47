"""Shared application configuration package."""

from .settings import (
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
    is_placeholder_secret,
    load_settings_or_exit,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
    "is_placeholder_secret",
    "load_settings_or_exit",
]
