"""
Authentication configuration settings.

JWT signing parameters for bearer tokens.

Dependencies: pydantic, pydantic_settings
System role: Token issuing and verification configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """JWT bearer token configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    secret_key: str = Field(
        default="change-me-in-production",
        description="HMAC secret used to sign access tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        description="Access token lifetime in minutes",
    )
