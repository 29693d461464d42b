"""
Configuration management module.

Type-safe settings for the LearnHub API loaded from environment variables
and an optional .env file: application, database and auth sections.
"""

from backend.configs.auth import AuthSettings
from backend.configs.database import DatabaseSettings
from backend.configs.settings import Settings, get_settings

__all__ = ["AuthSettings", "DatabaseSettings", "Settings", "get_settings"]
