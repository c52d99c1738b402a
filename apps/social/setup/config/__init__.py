"""Configuration."""

from apps.social.setup.config.settings import (
    ConfigLogBuffer,
    ConfigurationError,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "ConfigLogBuffer",
    "ConfigurationError",
    "Settings",
    "get_settings",
    "load_settings",
]
