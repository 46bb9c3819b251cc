"""Library configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for date range filters, read from ``DATE_RANGE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="DATE_RANGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore unrelated variables from a shared .env
    )

    # Environment
    ENV: str = "dev"

    # Ambient time zone used to turn calendar dates into day boundaries
    TIMEZONE: str = "UTC"

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG shows every filter registration


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
