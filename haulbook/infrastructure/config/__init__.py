"""Configuration: settings, logging, database and dependency wiring."""

from haulbook.infrastructure.config.database import DatabaseConfig
from haulbook.infrastructure.config.settings import Settings, get_settings

__all__ = ["DatabaseConfig", "Settings", "get_settings"]
