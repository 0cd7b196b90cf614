"""Configuration for sermo."""

from sermo.config.settings import (
    LogSettings,
    ProfileSettings,
    Settings,
    configure,
    get_settings,
    settings,
)

__all__ = [
    "LogSettings",
    "ProfileSettings",
    "Settings",
    "configure",
    "get_settings",
    "settings",
]
