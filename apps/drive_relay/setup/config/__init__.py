"""Configuration."""

from apps.drive_relay.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
