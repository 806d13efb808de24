"""Configuration module - settings and environment management."""

from newsroom.config.settings import (
    ConfigurationError,
    DEFAULT_MAX_PAGE,
    Settings,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_MAX_PAGE",
    "Settings",
    "load_settings",
]
