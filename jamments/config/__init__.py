"""Configuration package."""

from .settings import ClientConfig, Settings, settings

__all__ = ["ClientConfig", "Settings", "settings"]
