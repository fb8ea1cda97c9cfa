"""
Centralized configuration for the API bindings.

All settings are loaded from environment variables prefixed with ``STRIPE_``
(e.g., STRIPE_API_KEY, STRIPE_API_VERSION) or from a local ``.env`` file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    api_key: str = ""

    # Endpoint
    api_base: str = "https://api.stripe.com"
    api_version: Optional[str] = None

    # Transport
    timeout: float = 80.0  # seconds

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the library's logger hierarchy."""
    settings = settings or get_settings()
    logging.getLogger("stripe_bindings").setLevel(settings.log_level.upper())
