"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

SECONDS_PER_DAY = 24 * 60 * 60


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    meals_table: str = "meals"
    identity_cookie_name: str = "userId"
    identity_ttl_days: int = 7
    identity_sliding_expiry: bool = True
    identity_cookie_secure: bool = False
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def identity_max_age_seconds(self) -> int:
        """Cookie lifetime for the identity token."""
        return self.identity_ttl_days * SECONDS_PER_DAY
